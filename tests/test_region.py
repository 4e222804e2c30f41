"""Test suite for region.py - named image regions."""

import arcade
import pytest
from arcade.texture import Texture

from fsmactions import Region, err


@pytest.fixture
def fake_textures(monkeypatch):
    """Replace arcade.load_texture with an in-memory texture factory."""
    loaded = []

    def load_texture(path):
        loaded.append(path)
        return Texture.create_empty(path, (4, 4))

    monkeypatch.setattr(arcade, "load_texture", load_texture)
    return loaded


class TestRegionDecoding:
    """Test suite for Region.from_json."""

    def test_full_record(self):
        region = Region.from_json({"name": "Door", "x": 10, "y": 20, "w": 30, "h": 40, "imageLoc": "door.png"})
        assert (region.name, region.x, region.y, region.w, region.h) == ("Door", 10.0, 20.0, 30.0, 40.0)
        assert region.image_loc == "door.png"
        assert err.messages() == []

    def test_bad_fields_fall_back(self):
        region = Region.from_json({"name": 5, "x": "left", "imageLoc": None})
        assert region.name == ""
        assert region.x == 0.0
        assert region.image_loc == ""
        assert len(err.messages()) == 2

    def test_round_trip_record(self):
        record = {"name": "Door", "x": 1.0, "y": 2.0, "w": 3.0, "h": 4.0, "imageLoc": "d.png"}
        assert Region.from_json(record).to_json() == record


class TestRegionImage:
    """Test suite for image location handling."""

    def test_setting_image_marks_damaged(self):
        region = Region(name="Door", image_loc="a.png")
        region.damaged = False
        region.image_loc = "b.png"
        assert region.damaged
        assert region.image_loc == "b.png"

    def test_setting_same_image_is_quiet(self):
        region = Region(name="Door", image_loc="a.png")
        region.damaged = False
        region.image_loc = "a.png"
        assert not region.damaged

    def test_contains(self):
        region = Region(x=10, y=10, w=20, h=20)
        assert region.contains(15, 25)
        assert not region.contains(5, 15)

    def test_no_image_means_no_texture(self, fake_textures):
        region = Region(name="Empty")
        assert region.load_texture() is None
        assert region.make_sprite() is None
        assert fake_textures == []

    def test_texture_is_cached_until_image_changes(self, fake_textures):
        region = Region(name="Door", image_loc="a.png")
        first = region.load_texture()
        assert region.load_texture() is first
        region.image_loc = "b.png"
        region.load_texture()
        assert fake_textures == ["a.png", "b.png"]

    def test_make_sprite_fills_region(self, fake_textures):
        region = Region(name="Door", x=100, y=50, w=40, h=20, image_loc="a.png")
        sprite = region.make_sprite()
        assert sprite.center_x == 120
        assert sprite.center_y == 60
        assert sprite.width == pytest.approx(40)
        assert sprite.height == pytest.approx(20)
        assert not region.damaged

    def test_debug_strings(self):
        region = Region(name="Door", image_loc="a.png")
        assert region.debug_tag() == "Region(Door)"
        assert region.debug_string(1).startswith("  Door ")
