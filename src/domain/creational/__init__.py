"""Creational patterns: Abstract Factory, Builder, Factory Method, Singleton, Prototype."""
