"""Blueprints for the Property API."""
