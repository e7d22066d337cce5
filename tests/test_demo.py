from village import auth, storage
from village.demo import DEMO_PASSWORD, create_demo_data


def test_create_demo_data(capsys):
    auth.register("leftover", "password1")
    create_demo_data()

    assert [u.username for u in storage.list_users()] == ["demo", "mayor"]
    assert storage.get_user("mayor").role == "ADMIN"
    assert len(storage.get_villagers("demo")) == 4
    assert auth.login("demo", DEMO_PASSWORD)["user"]["username"] == "demo"
    assert "demo accounts" in capsys.readouterr().out
