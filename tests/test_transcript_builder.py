from speech_gateway.domain import RecognitionAlternative, RecognitionResult, TranscriptBuilder


def alt(text: str) -> RecognitionAlternative:
    return RecognitionAlternative(transcript=text)


def test_takes_first_alternative_of_each_result():
    results = [
        RecognitionResult(alternatives=[alt("a")]),
        RecognitionResult(alternatives=[]),
        RecognitionResult(alternatives=[alt("c"), alt("ignored")]),
    ]

    assert TranscriptBuilder().build(results) == "a\n\nc"


def test_no_results_is_empty_string():
    assert TranscriptBuilder().build([]) == ""


def test_single_result_has_no_separator():
    results = [RecognitionResult(alternatives=[alt("Hello, world.")])]

    assert TranscriptBuilder().build(results) == "Hello, world."
