"""Critter Village game server: villagers, catching, museum, inventory and shop."""
