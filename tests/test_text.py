from spriteworks.text import to_upper


def test_ascii_upper():
    assert to_upper("Ending") == "ENDING"


def test_non_ascii_unchanged():
    assert to_upper("é") == "é"


def test_idempotent_and_length_preserving():
    text = "WhispyWood.png"
    once = to_upper(text)
    assert to_upper(once) == once
    assert len(once) == len(text)