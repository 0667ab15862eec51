from defender.geometry import WINDOW_HEIGHT, WINDOW_WIDTH
from defender.strings import (
    end_game_texts,
    fuel_text,
    highest_score_text,
    instruction_texts,
    loss_text,
    play_text,
    score_text,
    shield_label,
    victory_text,
)


def test_instructions_include_title_and_controls():
    texts = [item.text for item in instruction_texts()]
    assert "The Defender" in texts
    assert "Press UP key to move up" in texts
    assert "Press S key to activate shield" in texts
    assert "Play" not in texts


def test_instructions_start_with_up_key():
    first = instruction_texts()[0]
    assert first.text == "Press UP key to move up"
    assert first.colour == (255, 140, 0)


def test_every_text_is_inside_window():
    items = instruction_texts() + end_game_texts() + [
        play_text(),
        victory_text(),
        loss_text(),
        shield_label(),
        fuel_text(3),
        score_text(4),
        highest_score_text(5),
    ]
    for item in items:
        assert 0 <= item.position.x < WINDOW_WIDTH
        assert 0 <= item.position.y < WINDOW_HEIGHT
        assert item.size > 0


def test_end_game_texts():
    assert [item.text for item in end_game_texts()] == [
        "Game Over!",
        "Press R key to restart the game",
    ]


def test_victory_and_loss_share_position():
    assert victory_text().text == "You Won!"
    assert loss_text().text == "You Lost!"
    assert victory_text().position == loss_text().position


def test_play_text():
    item = play_text()
    assert item.text == "Play"
    assert item.size == 80


def test_dynamic_texts_carry_value():
    assert fuel_text(42).text == "Fuel: 42"
    assert score_text(17).text == "Score: 17"
    assert highest_score_text(99).text == "HighestScore: 99"


def test_shield_label():
    assert shield_label().text == "Shields:"
    assert shield_label().size == 35