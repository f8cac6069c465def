"""Facade: one home theater object sequencing four independent subsystems."""

from typing import List

DEFAULT_VOLUME = 5


class Projector:
    def __init__(self) -> None:
        self.is_on = False

    def turn_on(self) -> str:
        self.is_on = True
        return "Projector is now ON."

    def turn_off(self) -> str:
        self.is_on = False
        return "Projector is now OFF."


class SoundSystem:
    def __init__(self) -> None:
        self.is_on = False
        self.volume = 0

    def turn_on(self) -> str:
        self.is_on = True
        return "Sound System is now ON."

    def turn_off(self) -> str:
        self.is_on = False
        return "Sound System is now OFF."

    def set_volume(self, level: int) -> str:
        self.volume = level
        return f"Setting sound system volume to {level}."


class DVDPlayer:
    def __init__(self) -> None:
        self.is_on = False
        self.current_movie = None

    def turn_on(self) -> str:
        self.is_on = True
        return "DVD Player is now ON."

    def turn_off(self) -> str:
        self.is_on = False
        self.current_movie = None
        return "DVD Player is now OFF."

    def play_movie(self, movie: str) -> str:
        self.current_movie = movie
        return f"Playing movie: {movie}"


class Screen:
    def __init__(self) -> None:
        self.is_lowered = False

    def lower(self) -> str:
        self.is_lowered = True
        return "Screen is now lowered."

    def raise_screen(self) -> str:
        self.is_lowered = False
        return "Screen is now raised."


class HomeTheaterFacade:
    """
    Simple interface over the home theater subsystems.

    Clients call ``watch_movie`` and ``end_movie``; the facade owns the
    subsystems and knows the order in which they must be driven.
    """

    def __init__(self, volume: int = DEFAULT_VOLUME):
        self.volume = volume
        self.projector = Projector()
        self.sound_system = SoundSystem()
        self.dvd_player = DVDPlayer()
        self.screen = Screen()

    def watch_movie(self, movie: str) -> List[str]:
        return [
            "Getting ready to watch a movie...",
            self.screen.lower(),
            self.projector.turn_on(),
            self.sound_system.turn_on(),
            self.sound_system.set_volume(self.volume),
            self.dvd_player.turn_on(),
            self.dvd_player.play_movie(movie),
        ]

    def end_movie(self) -> List[str]:
        return [
            "Shutting down home theater...",
            self.dvd_player.turn_off(),
            self.sound_system.turn_off(),
            self.projector.turn_off(),
            self.screen.raise_screen(),
        ]
