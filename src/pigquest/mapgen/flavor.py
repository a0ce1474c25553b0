# Level captions, one per campaign level; indexing wraps for levels past the end.

from typing import Tuple

FLAVOR_TEXTS: Tuple[str, ...] = (
    "Welcome to the mud! Follow the path.",
    "Walls are solid. Bacon is not.",
    "Twists and turns... don't get dizzy!",
    "Is that a shortcut? Or a trap?",
    "Calculate your steps carefully.",
    "The path is never straight.",
    "Mud is waiting... if you can find it.",
    "Left? Right? Maybe... Up?",
    "Think before you oink.",
    "Level 10! The labyrinth tightens!",
    "Don't get lost in the sauce.",
    "A true Super Pig knows the way.",
    "Dead ends are just resting spots.",
    "Almost there... theoretically.",
    "Use your big brain!",
    "The goal smells like truffles.",
    "Watch out for the long way around.",
    "Speed is good, accuracy is better.",
    "Only one path is the shortest.",
    "Level 20! It's getting serious.",
    "Getting harder, isn't it?",
    "Navigate the chaos.",
    "Every step counts.",
    "Don't backtrack if you don't have to.",
    "Focus on the destination.",
    "The walls are closing in!",
    "Master of the Maze!",
    "Two levels left! Stay sharp!",
    "One... last... puzzle.",
    "FINAL LEVEL! PROVE YOUR WORTH!",
)


def flavor_for_level(level: int) -> str:
    return FLAVOR_TEXTS[(level - 1) % len(FLAVOR_TEXTS)]


def caption_for_level(level: int) -> str:
    return f"Lvl {level}: {flavor_for_level(level)}"
