"""Tests for the lexicon sentiment scorer."""

import pytest

from retail_insights.schemas import ReviewRecord
from retail_insights.sentiment import DEFAULT_LEXICON, Lexicon, score, score_text


def review(text):
    return {"Review": text}


def test_balanced_reviews_score_zero():
    assert score([review("Great quality"), review("Terrible service")]) == 0


def test_no_reviews_score_zero():
    assert score([]) == 0.0


def test_score_is_clamped_to_one():
    assert score([review("Great, excellent and amazing")]) == 1.0


def test_score_is_clamped_to_minus_one():
    assert score([review("Awful. The worst, horrible fit")]) == -1.0


def test_average_over_reviews():
    reviews = [review("good"), review("nothing to say"), review("fine"), review("love it")]

    assert score(reviews) == pytest.approx(0.5)


def test_words_count_once_per_review():
    assert score_text("good good good") == 1


def test_matching_is_case_insensitive():
    assert score_text("GREAT fit") == 1


def test_substring_matching_by_default():
    # "badly" contains "bad"
    assert score_text("badly stitched") == -1


def test_whole_word_matching():
    lexicon = Lexicon(whole_words=True)

    assert score_text("badly stitched", lexicon) == 0
    assert score_text("bad stitching", lexicon) == -1


def test_custom_lexicon():
    lexicon = Lexicon(positive=frozenset({"soft"}), negative=frozenset({"itchy"}))

    assert score([review("So soft!"), review("Soft but itchy")], lexicon) == pytest.approx(0.5)


def test_default_lexicon_is_immutable():
    with pytest.raises(Exception):
        DEFAULT_LEXICON.whole_words = True


def test_accepts_records_strings_and_missing_text():
    record = ReviewRecord(date="2024-08-01", rating=5, review_text="Perfect", product="Kurta")

    assert score([record]) == 1.0
    assert score(["wonderful"]) == 1.0
    assert score([{"Rating": 3}]) == 0.0
