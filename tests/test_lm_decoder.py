import pytest

from tevr_asr.config import ConfigError
from tevr_asr.decoding.scorer import LanguageModelScorer

kenlm = pytest.importorskip("kenlm")

from tevr_asr.decoding.lm_decoder import build_kenlm_oracle  # noqa: E402

ARPA = """\\data\\
ngram 1=5

\\1-grams:
-1.5\t<unk>\t0
0\t<s>\t0
-0.8\t</s>\t0
-0.7\thallo\t0
-0.9\twelt\t0

\\end\\
"""


@pytest.fixture
def arpa_path(tmp_path):
    p = tmp_path / "tiny.arpa"
    p.write_text(ARPA, encoding="utf-8")
    return p


def test_kenlm_oracle_scores_words(arpa_path):
    oracle = build_kenlm_oracle(arpa_path, sanity_word="hallo")
    assert oracle.vocabulary_lookup("hallo")
    assert not oracle.vocabulary_lookup("xyz")

    raw, state = oracle.score(oracle.initial_state(), "hallo")
    assert raw == pytest.approx(-0.7, abs=1e-4)
    unk, _ = oracle.score(state, "xyz")
    assert unk == pytest.approx(-1.5, abs=1e-4)


def test_kenlm_oracle_in_scorer(arpa_path):
    scorer = LanguageModelScorer(build_kenlm_oracle(arpa_path), space=" ")
    assert scorer.score("hallo welt") == pytest.approx(scorer.score("hallo "))
    assert scorer.score("hallo xyz ") < scorer.score("hallo welt ") - 10.0


def test_sanity_word_must_be_known(arpa_path):
    with pytest.raises(ConfigError):
        build_kenlm_oracle(arpa_path, sanity_word="mückenstiche")
