# view_transition.py
"""
View Transition Module

Zooms into an entity's detail panel and back out again. The logical mode
(world.is_zoomed) flips at the moment the user selects an entity, while the
camera motion and fades play out over the following frames; the state here
tracks that visual progress separately:

    normal -> entering-focus -> focused -> exiting-focus -> normal

A back-action during entering-focus cancels the zoom-in tweens and starts the
reverse from wherever the entity currently is. The transform captured at
selection is never overwritten until the exit completes.
"""

import logging

from config import FRAMES_PER_SECOND
from tween import Tween, TweenGroup
from world import FocusTransition

logger = logging.getLogger(__name__)

NORMAL = "normal"
ENTERING_FOCUS = "entering-focus"
FOCUSED = "focused"
EXITING_FOCUS = "exiting-focus"


class ViewTransitionCoordinator:
    def __init__(self, world, ui_config):
        """
        Parameters:
            world (WorldState): The shared world; its zoom flags are owned by this coordinator.
            ui_config (dict): CONFIG["ui"], durations in seconds.
        """
        self.world = world
        self.config = ui_config
        self.state = NORMAL
        self.focus_transition = None
        self.panel = None
        self.tweens = TweenGroup()
        self._entity_tween = None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def frames(seconds):
        return seconds * FRAMES_PER_SECOND

    @property
    def is_animating(self):
        return self.state in (ENTERING_FOCUS, EXITING_FOCUS)

    @property
    def focused_entity(self):
        if self.focus_transition is None:
            return None
        return self.world.get_entity(self.focus_transition.entity_id)

    def _focal_transform(self, entity):
        return entity.focal_transform(self.world.width, self.world.height,
                                      self.focus_transition.transform, lift=self.config["focal_lift"])

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def select(self, entity_id):
        """
        Starts zooming into an entity.

        Returns:
            bool: True if a zoom started; False if the request was ignored.
        """
        if self.world.is_zoomed:
            logger.debug("Ignoring selection of %s: already zoomed", entity_id)
            return False
        entity = self.world.get_entity(entity_id)
        if entity is None:
            logger.debug("Ignoring selection of unknown entity %s", entity_id)
            return False

        logger.info("Zooming to %s", entity.name)
        self.focus_transition = FocusTransition(entity_id, entity.transform.copy())
        self.world.focus(entity_id)
        entity.on_focus_enter()

        self.panel = entity.create_detail_view()
        self.panel.alpha = 0.0

        cfg = self.config
        self.tweens.cancel_all()
        for visual in self.world.visuals():
            if visual is not entity:
                self.tweens.add(Tween(visual, {"alpha": cfg["faded_alpha"]}, self.frames(cfg["fade_duration"])))
        focal = self._focal_transform(entity)
        self._entity_tween = self.tweens.add(
            Tween(entity.transform, focal.as_dict(), self.frames(cfg["zoom_duration"])))
        self.tweens.add(Tween(self.panel, {"alpha": 1.0}, self.frames(cfg["fade_duration"]),
                              delay=self.frames(cfg["panel_delay"])))
        self.state = ENTERING_FOCUS
        return True

    def back(self):
        """
        Starts returning from the detail view.

        Returns:
            bool: True if the exit started; False if there was nothing to exit.
        """
        if self.state not in (ENTERING_FOCUS, FOCUSED):
            logger.debug("Ignoring back-action in state %s", self.state)
            return False
        entity = self.focused_entity
        logger.info("Leaving detail view of %s", entity.name)

        cfg = self.config
        self.tweens.cancel_all()
        if self.panel is not None:
            self.tweens.add(Tween(self.panel, {"alpha": 0.0}, self.frames(cfg["fade_duration"])))
        for visual in self.world.visuals():
            if visual is not entity:
                self.tweens.add(Tween(visual, {"alpha": 1.0}, self.frames(cfg["fade_duration"])))
        self._entity_tween = self.tweens.add(
            Tween(entity.transform, self.focus_transition.transform.as_dict(), self.frames(cfg["zoom_duration"])))
        self.state = EXITING_FOCUS
        return True

    def update(self, delta):
        """Advances the in-flight tweens and completes transitions whose tweens have all finished."""
        if self.state == NORMAL:
            return
        self.tweens.update(delta)
        if self.tweens.active:
            return
        if self.state == ENTERING_FOCUS:
            self.state = FOCUSED
        elif self.state == EXITING_FOCUS:
            self._finish_exit()

    def _finish_exit(self):
        entity = self.focused_entity
        entity.transform.apply(self.focus_transition.transform.as_dict())
        for visual in self.world.visuals():
            visual.alpha = 1.0
        self.focus_transition = None
        self.panel = None
        self._entity_tween = None
        self.world.clear_focus()
        entity.on_focus_exit()
        self.state = NORMAL
        logger.debug("Returned to normal view")

    # ------------------------------------------------------------------
    # Resize
    # ------------------------------------------------------------------
    def resize(self, width, height):
        """Keeps the focused entity on its focal transform after the world has been resized."""
        if self.state not in (ENTERING_FOCUS, FOCUSED):
            return
        entity = self.focused_entity
        focal = self._focal_transform(entity)
        if self._entity_tween is not None and not self._entity_tween.done:
            self._entity_tween.retarget(focal.as_dict())
        else:
            entity.transform.apply(focal.as_dict())
