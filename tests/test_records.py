from study_quiz.records import (
    QuestionKind,
    QuestionRecord,
    format_record,
    parse_record,
    split_lines,
)


def test_parse_true_false_record():
    record = parse_record("tf,the sky is blue,t")
    assert record.kind is QuestionKind.TRUE_FALSE
    assert record.question == "the sky is blue"
    assert record.answer == "t"
    assert record.choices == ()


def test_parse_multiple_choice_record_keeps_choice_order():
    record = parse_record("mc,How many legs does a dog have?,2,a,b,c,d")
    assert record.kind is QuestionKind.MULTIPLE_CHOICE
    assert record.answer == "2"
    assert record.choices == ("a", "b", "c", "d")


def test_unknown_or_missing_tag_defaults_to_true_false():
    assert parse_record("XX,Q,T").kind is QuestionKind.TRUE_FALSE
    empty = parse_record("")
    assert empty.kind is QuestionKind.TRUE_FALSE
    assert empty.question == ""
    assert empty.answer == ""


def test_fields_are_not_trimmed():
    record = parse_record("MC, spaced ,1, a,b ")
    assert record.question == " spaced "
    assert record.choices == (" a", "b ")


def test_split_lines_handles_crlf_and_keeps_trailing_empty_line():
    assert split_lines("a\r\nb\nc") == ["a", "b", "c"]
    assert split_lines("a\nb\n") == ["a", "b", ""]
    assert split_lines("") == [""]


def test_format_record_matches_author_output():
    tf = QuestionRecord(QuestionKind.TRUE_FALSE, "Question text", "T")
    mc = QuestionRecord(
        QuestionKind.MULTIPLE_CHOICE, "Q", "2", ("A", "B", "C")
    )
    assert format_record(tf) == "TF,Question text,T"
    assert format_record(mc) == "MC,Q,2,A,B,C"
