import pytest
from lexicon_emotion.config import EngineConfig
from lexicon_emotion.lexicon import Lexicon
from lexicon_emotion.score import (
    Analyzer,
    EmptyInputError,
    analyze,
)


def _lex(**entries):
    return Lexicon(entries)


def test_no_matches_is_neutral_with_zero_scores():
    res = analyze(
        'the quick brown fox',
        _lex(good='Positive'),
    )
    assert res.sentiment == 'Neutral'
    assert res.positive_score == 0.0
    assert res.negative_score == 0.0
    assert all(v == 0.0 for v in res.emotions.values())
    assert res.dominant_emotion == 'neutral'
    assert res.dominant_emotion_score == pytest.approx(1.0)


def test_analyze_is_idempotent():
    lex = _lex(
        good='Positive',
        bad='Negative',
        happy='Positive',
    )
    text = 'Good day, not bad at all, haapy!!'
    first = analyze(
        text,
        lex,
    )
    second = analyze(
        text,
        lex,
    )
    assert first.to_dict() == second.to_dict()
    assert first.positive_count == second.positive_count
    assert dict(first.emotion_counts) == dict(second.emotion_counts)


def test_negation_flips_positive_match():
    res = analyze(
        'not great',
        _lex(great='Positive'),
    )
    assert res.negative_count == 1
    assert res.positive_count == 0
    assert res.sentiment == 'Negative'
    assert res.negative_score == pytest.approx(1.0)


def test_negation_flips_negative_match():
    res = analyze(
        'never bad',
        _lex(bad='Negative'),
    )
    assert res.positive_count == 1
    assert res.negative_count == 0
    assert res.sentiment == 'Positive'


def test_negation_does_not_flip_emotion():
    res = analyze(
        'not happy',
        _lex(happy='Positive'),
    )
    assert res.negative_count == 1
    assert res.emotions['joy'] == pytest.approx(1.0)
    assert res.emotions['anger'] == 0.0


def test_negation_only_looks_one_token_back():
    res = analyze(
        'not the great',
        _lex(great='Positive'),
    )
    assert res.positive_count == 1
    assert res.negative_count == 0
    assert res.sentiment == 'Positive'


def test_double_match_count():
    res = analyze(
        'good bad good',
        _lex(
            good='Positive',
            bad='Negative',
        ),
    )
    assert res.positive_count == 2
    assert res.negative_count == 1
    assert res.positive_score == pytest.approx(2 / 3)
    assert res.negative_score == pytest.approx(1 / 3)
    assert res.sentiment == 'Positive'
    assert res.dominant_emotion == 'positive'
    assert res.dominant_emotion_score == pytest.approx(2 / 3)
    assert res.emotions['joy'] == pytest.approx(2 / 3)
    assert res.emotions['anger'] == pytest.approx(1 / 3)


def test_tie_is_neutral_with_zero_remainder():
    res = analyze(
        'good bad',
        _lex(
            good='Positive',
            bad='Negative',
        ),
    )
    assert res.sentiment == 'Neutral'
    assert res.positive_score + res.negative_score == pytest.approx(1.0)
    assert res.dominant_emotion == 'neutral'
    assert res.dominant_emotion_score == pytest.approx(0.0)


def test_fuzzy_tolerance():
    lex = _lex(happy='Positive')
    hit = analyze(
        'haapy',
        lex,
    )
    assert hit.sentiment == 'Positive'
    assert hit.positive_count == 1
    assert hit.emotions['joy'] == pytest.approx(1.0)
    miss = analyze(
        'hxpzy',
        lex,
    )
    assert miss.sentiment == 'Neutral'
    assert miss.positive_count == 0


def test_fuzzy_tie_goes_to_lexically_smallest_key():
    forward = Lexicon({
            'card': 'Positive',
            'cart': 'Negative',
        })
    backward = Lexicon({
            'cart': 'Negative',
            'card': 'Positive',
        })
    for lex in (forward, backward):
        res = analyze(
            'carx',
            lex,
        )
        assert res.sentiment == 'Positive'


def test_repeat_collapse_matches_lexicon_entry():
    lex = _lex(soo='Positive')
    for text in ('sooooo', 'soo'):
        res = analyze(
            text,
            lex,
        )
        assert res.positive_count == 1


@pytest.mark.parametrize(
    'text',
    [
        '',
        '   ',
        '\n\t',
        None,
    ],
)
def test_empty_input_raises(text):
    with pytest.raises(EmptyInputError):
        analyze(
            text,
            _lex(good='Positive'),
        )


def test_empty_input_error_is_value_error():
    assert issubclass(
        EmptyInputError,
        ValueError,
    )


def test_emotion_distribution_sums_to_one():
    lex = _lex(
        happy='Positive',
        sad='Negative',
        angry='Negative',
        scared='Negative',
    )
    res = analyze(
        'happy sad angry wow scared, so sad',
        lex,
    )
    assert sum(res.emotions.values()) == pytest.approx(
        1.0,
        abs=1e-09,
    )
    assert res.emotions['sadness'] == pytest.approx(2 / 6)
    assert res.emotions['surprise'] == pytest.approx(1 / 6)
    assert res.positive_score + res.negative_score <= 1.0 + 1e-12


def test_interjections_match_without_lexicon():
    lex = Lexicon({})
    res = analyze(
        'wow',
        lex,
    )
    assert res.sentiment == 'Positive'
    assert res.emotions['surprise'] == pytest.approx(1.0)
    res = analyze(
        'ugh',
        lex,
    )
    assert res.sentiment == 'Negative'
    assert res.emotions['anger'] == pytest.approx(1.0)


def test_neutral_interjection_counts_emotion_only():
    res = analyze(
        'oh',
        Lexicon({}),
    )
    assert res.sentiment == 'Neutral'
    assert res.positive_count == 0
    assert res.negative_count == 0
    assert res.emotions['surprise'] == pytest.approx(1.0)


def test_neutral_interjection_stops_fuzzy_lookup():
    res = analyze(
        'oh',
        _lex(ok='Negative'),
    )
    assert res.negative_count == 0


def test_degraded_lexicon_scores_neutral():
    res = analyze(
        'what a great happy day',
        Lexicon.empty(),
    )
    assert res.sentiment == 'Neutral'
    assert res.positive_score == 0.0
    assert res.negative_score == 0.0


def test_custom_tables_are_used():
    cfg = EngineConfig(
        negators=['sans'],
        interjections={},
        emotion_map={'good': 'surprise'},
    )
    analyzer = Analyzer(
        _lex(good='Positive'),
        cfg,
    )
    res = analyzer.analyze('sans good')
    assert res.negative_count == 1
    assert res.emotions['surprise'] == pytest.approx(1.0)
    assert analyzer.analyze('wow').sentiment == 'Neutral'


def test_emotion_fallback_uses_polarity_scores():
    cfg = EngineConfig(
        emotion_map={'good': 'trust'},
        emotion_fallback=True,
    )
    res = Analyzer(
        _lex(good='Positive'),
        cfg,
    ).analyze('good')
    assert res.emotions['joy'] == pytest.approx(1.0)
    assert sum(res.emotion_counts.values()) == 0
    plain = Analyzer(
        _lex(good='Positive'),
        EngineConfig(emotion_map={'good': 'trust'}),
    ).analyze('good')
    assert all(v == 0.0 for v in plain.emotions.values())


def test_fuzzy_can_be_disabled():
    res = Analyzer(
        _lex(happy='Positive'),
        EngineConfig(fuzzy_enabled=False),
    ).analyze('haapy')
    assert res.sentiment == 'Neutral'


def test_to_dict_shape_and_stamp():
    res = analyze(
        'great',
        _lex(great='Positive'),
    )
    assert res.timestamp is None
    stamped = res.stamped()
    assert stamped.timestamp
    assert res.timestamp is None
    out = stamped.to_dict()
    assert set(out) == {
        'sentiment',
        'modelVersion',
        'positiveScore',
        'negativeScore',
        'emotions',
        'dominantEmotion',
        'dominantEmotionScore',
        'timestamp',
    }
    assert out['modelVersion'] == 'v0.0.5-MaxLexicon'
    assert set(out['emotions']) == {
        'joy',
        'anger',
        'sadness',
        'fear',
        'surprise',
    }


def test_explain_traces_matches():
    analyzer = Analyzer(_lex(
            great='Positive',
            happy='Positive',
        ))
    steps = analyzer.explain('not great, 123 haapy')
    assert [s['normalized'] for s in steps] == ['great', 'haapy']
    assert steps[0]['negated'] is True
    assert steps[0]['how'] == 'direct'
    assert steps[1]['how'] == 'fuzzy'
    assert steps[1]['key'] == 'happy'
    assert steps[1]['distance'] == 1


def test_labels_compare_case_insensitively():
    from lexicon_emotion.lexicon import parse_lexicon

    res = analyze(
        'great',
        parse_lexicon('great:positive'),
    )
    assert res.sentiment == 'Positive'
    assert res.positive_count == 1
    neg = analyze(
        'not dreadful',
        parse_lexicon('dreadful:NEGATIVE'),
    )
    assert neg.positive_count == 1
    assert neg.emotions['anger'] == pytest.approx(1.0)
