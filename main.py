# main.py
"""
Coastal Signals Main Entry Point

This module initializes the Pygame environment, sets up the main window,
and manages the main loop that handles event processing, state updates,
and rendering of the current screen (state).

The application starts on the loading screen, which hands over to the
interactive coastline scene once the textures have been loaded.
"""

import argparse
import logging
import sys

import pygame

from config import CONFIG
from states.loading import LoadingState

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Lighthouses signalling a research vessel along the coast.")
    parser.add_argument("--debug", action="store_true", help="verbose logging")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Initializing application...")

    # Initialize the Pygame library.
    pygame.init()

    renderer = CONFIG["renderer"]
    screen = pygame.display.set_mode((renderer["width"], renderer["height"]), pygame.RESIZABLE)
    pygame.display.set_caption("Coastal Signals")

    # Create a clock object to manage frame rate.
    clock = pygame.time.Clock()

    current_state = LoadingState(screen)

    running = True
    while running:
        dt = clock.tick(renderer["fps"]) / 1000.0  # dt in seconds

        # Retrieve all Pygame events.
        events = pygame.event.get()
        for event in events:
            # If the user closes the window, exit the loop.
            if event.type == pygame.QUIT:
                running = False
            # Handle window resize events.
            elif event.type == pygame.VIDEORESIZE:
                screen = pygame.display.set_mode((event.w, event.h), pygame.RESIZABLE)

        # Delegate event handling, state updates, and rendering to the current state.
        current_state.handle_events(events)
        current_state.update(dt)
        current_state.render(screen)
        pygame.display.flip()  # Update the full display surface to the screen.

        # Check if the current state requests a transition to another state.
        next_state = current_state.get_next_state()
        if next_state is not None:
            current_state = next_state

    # Quit Pygame and exit the program.
    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
