"""Headless pygame for the whole test run."""

import os

os.environ["SDL_VIDEODRIVER"] = "dummy"
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame
import pytest

from ClockFace import ClockTime


@pytest.fixture()
def surface():
  return pygame.Surface((256, 256))


@pytest.fixture()
def three_oclock():
  return ClockTime(3, 0, 0)
