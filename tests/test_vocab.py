import json

import numpy as np
import pytest
import yaml

from tevr_asr.data.vocab import (
    END_OF_SEQUENCE_ID,
    SPACE_ID,
    Vocabulary,
    VocabularyError,
    default_vocabulary,
    load_vocabulary,
)


def test_default_vocabulary_is_tevr_table():
    v = default_vocabulary()
    assert len(v) == 256
    assert v.surface(0) == ""
    assert v.surface(END_OF_SEQUENCE_ID) == " "
    assert v.surface(SPACE_ID) == " "
    assert v.surface(3) == "chen"
    assert v.surface(255) == "?"


def test_concatenate_appends_surface(vocab):
    assert vocab.concatenate("", vocab[3]) == "ab"
    assert vocab.concatenate("ab", vocab[4]) == "abcd"
    assert vocab.concatenate("ab", vocab[0]) == "ab"
    assert vocab.concatenate("ab", vocab[SPACE_ID]) == "ab "


def test_concatenate_does_not_duplicate_space(vocab):
    assert vocab.concatenate("ab ", vocab[SPACE_ID]) == "ab "
    # end-of-sequence has the space surface too
    assert vocab.concatenate("ab ", vocab[END_OF_SEQUENCE_ID]) == "ab "
    assert vocab.concatenate("ab", vocab[END_OF_SEQUENCE_ID]) == "ab "


def test_no_two_consecutive_spaces_for_any_token_sequence(vocab):
    rng = np.random.default_rng(0)
    for _ in range(200):
        text = ""
        for token_id in rng.integers(0, len(vocab), size=30):
            text = vocab.concatenate(text, vocab[int(token_id)])
        assert "  " not in text


def test_mapping_form_is_accepted():
    v = Vocabulary({"2": " ", "0": "", "1": " ", "3": "a"})
    assert len(v) == 4
    assert v[3].surface == "a"
    assert v[3].id == 3


@pytest.mark.parametrize(
    "tokens",
    [
        ["", " "],
        {0: "", 1: " ", 3: "a"},
        ["", " ", " ", 5],
        ["", " ", ""],
        {"x": "", 1: " ", 2: " "},
    ],
)
def test_malformed_vocabulary_fails_fast(tokens):
    with pytest.raises(VocabularyError):
        Vocabulary(tokens)


def test_single_string_is_not_a_vocabulary():
    with pytest.raises(VocabularyError):
        Vocabulary("abc")
    with pytest.raises(VocabularyError):
        Vocabulary("abcdef")


def test_surface_out_of_range(vocab):
    with pytest.raises(VocabularyError):
        vocab.surface(len(vocab))
    with pytest.raises(VocabularyError):
        vocab.surface(-1)


def test_duplicate_surfaces_are_allowed():
    v = Vocabulary(["", " ", " ", "a", "a"])
    assert v.surface(3) == v.surface(4)


def test_load_vocabulary_json_and_yaml(tmp_path):
    tokens = ["", " ", " ", "ab", "ü"]
    jp = tmp_path / "vocab.json"
    jp.write_text(json.dumps(tokens), encoding="utf-8")
    yp = tmp_path / "vocab.yaml"
    yp.write_text(yaml.safe_dump({"tokens": tokens}, allow_unicode=True), encoding="utf-8")

    for p in (jp, yp):
        v = load_vocabulary(p)
        assert [v.surface(i) for i in range(len(v))] == tokens


def test_load_vocabulary_rejects_scalars(tmp_path):
    p = tmp_path / "vocab.yaml"
    p.write_text("just a string\n", encoding="utf-8")
    with pytest.raises(VocabularyError):
        load_vocabulary(p)
    with pytest.raises(FileNotFoundError):
        load_vocabulary(tmp_path / "missing.json")
