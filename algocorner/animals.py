"""A small class hierarchy whose subclasses override one method."""

from __future__ import annotations


class Animal:
    """A generic animal."""

    def sound(self) -> str:
        """Describe the sound this animal makes."""
        return "The animal makes a sound"


class Pig(Animal):
    """A pig."""

    def sound(self) -> str:
        return "The pig says: wee wee"


class Dog(Animal):
    """A dog."""

    def sound(self) -> str:
        return "The dog says: bow wow"