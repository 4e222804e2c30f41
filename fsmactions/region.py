"""Named screen regions whose image can be changed by FSM actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from . import check
from .config import debug_log

if TYPE_CHECKING:
    import arcade


class Region:
    """A named rectangle on screen that displays an image.

    Regions are owned by the FSM that declares them. Actions hold a
    non-owning reference to the region they were bound to and change its
    ``image_loc`` when their transition fires.

    Args:
        name: Name used by transitions and actions to refer to this region.
        x, y: Lower-left corner.
        w, h: Size; a zero size means "use the image's own size".
        image_loc: Path (or arcade resource handle) of the image; ``""`` for none.
    """

    def __init__(
        self,
        name: str = "",
        x: float = 0,
        y: float = 0,
        w: float = 0,
        h: float = 0,
        image_loc: str = "",
    ):
        self.name = name
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self._image_loc = image_loc
        self._texture: arcade.Texture | None = None
        self.damaged = True

    @classmethod
    def from_json(cls, record: Any) -> Region:
        """Build a region from a flat ``{name, x, y, w, h, imageLoc}`` record."""
        record = check.record_val(record, "Region.from_json")
        return cls(
            name=check.string_val(record.get("name"), "Region.from_json{name:}"),
            x=check.number_val(record.get("x"), "Region.from_json{x:}"),
            y=check.number_val(record.get("y"), "Region.from_json{y:}"),
            w=check.number_val(record.get("w"), "Region.from_json{w:}"),
            h=check.number_val(record.get("h"), "Region.from_json{h:}"),
            image_loc=check.string_val(record.get("imageLoc"), "Region.from_json{imageLoc:}"),
        )

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name, "x": self.x, "y": self.y, "w": self.w, "h": self.h, "imageLoc": self.image_loc}

    @property
    def image_loc(self) -> str:
        return self._image_loc

    @image_loc.setter
    def image_loc(self, value: str) -> None:
        if value == self._image_loc:
            return
        debug_log(self, 2, f"{self.name!r} image {self._image_loc!r} -> {value!r}")
        self._image_loc = value
        self._texture = None
        self.damaged = True

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.x + self.w and self.y <= y <= self.y + self.h

    def load_texture(self) -> arcade.Texture | None:
        """Load (and cache) the texture for ``image_loc``; ``None`` when there is no image."""
        if not self._image_loc:
            return None
        if self._texture is None:
            import arcade

            self._texture = arcade.load_texture(self._image_loc)
        return self._texture

    def make_sprite(self) -> arcade.Sprite | None:
        """Create a sprite showing the current image, centred on the region."""
        texture = self.load_texture()
        if texture is None:
            return None

        import arcade

        sprite = arcade.Sprite(texture, center_x=self.x + self.w / 2, center_y=self.y + self.h / 2)
        if self.w > 0 and self.h > 0:
            sprite.width = self.w
            sprite.height = self.h
        self.damaged = False
        return sprite

    def debug_tag(self) -> str:
        return f"Region({self.name})"

    def debug_string(self, indent: int = 0) -> str:
        return f"{'  ' * indent}{self.name} ({self.x},{self.y},{self.w},{self.h}) {self.image_loc!r}"

    def __repr__(self) -> str:
        return f"Region(name={self.name!r}, image_loc={self.image_loc!r})"
