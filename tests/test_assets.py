import pygame
import pytest

from defender.assets import FALLBACK_TEXTURES, Assets
from defender.entities import LANDER_TEXTURE


def test_missing_texture_falls_back_to_expected_size(tmp_path):
    assets = Assets(tmp_path)
    surface = assets.texture("lander")
    assert surface.get_size() == (int(LANDER_TEXTURE.x), int(LANDER_TEXTURE.y))


def test_fallback_texture_uses_its_colour(tmp_path):
    assets = Assets(tmp_path)
    _, colour = FALLBACK_TEXTURES["gas_pump"]
    assert tuple(assets.texture("gas_pump").get_at((0, 0)))[:3] == colour


def test_texture_file_is_loaded(tmp_path):
    image = pygame.Surface((7, 5))
    image.fill((1, 2, 3))
    pygame.image.save(image, str(tmp_path / "Missile.png"))
    loaded = Assets(tmp_path).texture("missile")
    assert loaded.get_size() == (7, 5)
    assert tuple(loaded.get_at((3, 2)))[:3] == (1, 2, 3)


def test_texture_is_cached(tmp_path):
    assets = Assets(tmp_path)
    first = assets.texture("bullet")
    first.fill((9, 8, 7))
    again = assets.texture("bullet")
    assert tuple(again.get_at((0, 0)))[:3] == (9, 8, 7)
    assert again.get_size() == first.get_size()


def test_unknown_texture_raises(tmp_path):
    with pytest.raises(KeyError):
        Assets(tmp_path).texture("dragon")


def test_font_is_cached_per_size(tmp_path):
    assets = Assets(tmp_path)
    first = assets.font("game_name", 20)
    assert assets.font("game_name", 20) is first
    assert assets.font("game_name", 40) is not first


def test_font_renders_text(tmp_path):
    font = Assets(tmp_path).font("shields", 35)
    rendered = font.render("Shields:", True, (255, 0, 255))
    assert rendered.get_width() > 0
    assert rendered.get_height() > 0


def test_unknown_font_raises(tmp_path):
    with pytest.raises(KeyError):
        Assets(tmp_path).font("comic", 12)