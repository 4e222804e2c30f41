"""Door demo

A data-driven FSM from ``door.yaml`` drives the images of two regions.
Click the door to open/close it and the key to lock/unlock it. Action output
(``print``/``print_event``) goes to the console.

Run with ``FSMACTIONS_DEBUG=2`` to trace bindings and fired transitions.
"""

from __future__ import annotations

from pathlib import Path

import arcade

from fsmactions import Region, load_fsm

SCREEN_WIDTH = 640
SCREEN_HEIGHT = 400
SCREEN_TITLE = "FSM Door Demo"
BACKGROUND_COLOR = arcade.color.DARK_SLATE_GRAY
FSM_PATH = Path(__file__).with_name("door.yaml")


class DoorView(arcade.View):
    def __init__(self):
        super().__init__()
        self.fsm = load_fsm(FSM_PATH)
        self.sprites = arcade.SpriteList()
        self._sprite_for: dict[str, arcade.Sprite | None] = {}
        self._inside: Region | None = None

    def on_show_view(self):
        self.window.background_color = BACKGROUND_COLOR
        self.fsm.dump()

    # ------------------------------------------------------------------
    # Region helpers
    # ------------------------------------------------------------------
    def _region_at(self, x: float, y: float) -> Region | None:
        # Last declared region is on top
        for region in reversed(self.fsm.regions):
            if region.contains(x, y):
                return region
        return None

    def _refresh_sprites(self):
        for region in self.fsm.regions:
            if not region.damaged and region.name in self._sprite_for:
                continue
            old = self._sprite_for.get(region.name)
            if old is not None:
                old.remove_from_sprite_lists()
            sprite = region.make_sprite()
            self._sprite_for[region.name] = sprite
            if sprite is not None:
                self.sprites.append(sprite)
            region.damaged = False

    # ------------------------------------------------------------------
    # Input -> FSM events
    # ------------------------------------------------------------------
    def on_mouse_press(self, x, y, button, modifiers):
        region = self._region_at(x, y)
        if region is not None:
            self.fsm.actuate("press", region)

    def on_mouse_release(self, x, y, button, modifiers):
        region = self._region_at(x, y)
        if region is None:
            self.fsm.actuate("release_none")
        else:
            self.fsm.actuate("release", region)

    def on_mouse_motion(self, x, y, dx, dy):
        region = self._region_at(x, y)
        if region is self._inside:
            if region is not None:
                self.fsm.actuate("move_inside", region)
            return
        if self._inside is not None:
            self.fsm.actuate("exit", self._inside)
        if region is not None:
            self.fsm.actuate("enter", region)
        self._inside = region

    def on_key_press(self, key, modifiers):
        if key == arcade.key.ESCAPE:
            self.window.close()

    # ------------------------------------------------------------------
    # Update / Draw
    # ------------------------------------------------------------------
    def on_update(self, dt):
        self._refresh_sprites()

    def on_draw(self):
        self.clear()
        for region in self.fsm.regions:
            arcade.draw_lbwh_rectangle_outline(region.x, region.y, region.w, region.h, arcade.color.LIGHT_GRAY)
        self.sprites.draw()


def main():
    window = arcade.Window(SCREEN_WIDTH, SCREEN_HEIGHT, SCREEN_TITLE)
    window.show_view(DoorView())
    arcade.run()


if __name__ == "__main__":
    main()
