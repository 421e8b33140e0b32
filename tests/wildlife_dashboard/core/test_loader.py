from io import BytesIO, StringIO

import pytest

from wildlife_dashboard.core.exceptions import LoadError
from wildlife_dashboard.core.loader import load_records
from wildlife_dashboard.core.record import RECORD_FIELDS

HEADER = "Species,Date observed,Observer,No eggs,No of offspring’s,No of nests,No adults,Total,Comment"


def _write_csv(tmp_path, text: str, name: str = "data.csv"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_load_records_maps_headers_to_fields(tmp_path):
    path = _write_csv(
        tmp_path,
        HEADER + "\n"
        "Heron,01/04/2024,Alice,1,2,3,4,5,Nice day\n"
        "Duck,02/04/2024,Bob,0,0,0,0,0,\n",
    )

    df = load_records(path)

    assert list(df.columns) == list(RECORD_FIELDS)
    assert len(df) == 2
    first = df.iloc[0]
    assert first["species"] == "Heron"
    assert first["date_observed"] == "01/04/2024"
    assert first["observer"] == "Alice"
    assert first["egg_count"] == 1
    assert first["offspring_count"] == 2
    assert first["nest_count"] == 3
    assert first["adult_count"] == 4
    assert first["total"] == 5
    assert first["comment"] == "Nice day"
    assert df.iloc[1]["comment"] == ""


def test_load_records_accepts_ascii_apostrophe_header(tmp_path):
    header = HEADER.replace("offspring’s", "offspring's")
    path = _write_csv(tmp_path, header + "\nHeron,d,Alice,0,6,0,0,6,\n")

    df = load_records(path)

    assert df.iloc[0]["offspring_count"] == 6


def test_missing_numeric_column_defaults_to_zero(tmp_path):
    header = "Species,Date observed,Observer,No of nests,No adults,Total,Comment"
    path = _write_csv(tmp_path, header + "\nHeron,d,Alice,1,2,3,\n")

    df = load_records(path)

    assert df.iloc[0]["egg_count"] == 0
    assert df.iloc[0]["offspring_count"] == 0
    assert df.iloc[0]["total"] == 3


def test_non_numeric_and_blank_counts_become_zero(tmp_path):
    path = _write_csv(tmp_path, HEADER + "\nHeron,d,Alice,,n/a,-2,3 adults,,x\n")

    rec = load_records(path).iloc[0]

    assert rec["egg_count"] == 0
    assert rec["offspring_count"] == 0
    assert rec["nest_count"] == 0
    assert rec["adult_count"] == 3
    assert rec["total"] == 0
    assert not load_records(path).isna().any().any()


def test_headers_with_whitespace_and_bom_are_matched(tmp_path):
    header = "\ufeff" + ", ".join(HEADER.split(","))
    path = tmp_path / "bom.csv"
    path.write_text(header + "\nHeron, d, Alice, 1, 0, 0, 1, 1, ok\n", encoding="utf-8")

    rec = load_records(path).iloc[0]

    assert rec["species"] == "Heron"
    assert rec["egg_count"] == 1
    assert rec["comment"] == "ok"


def test_blank_lines_are_skipped(tmp_path):
    path = _write_csv(tmp_path, HEADER + "\nHeron,d,Alice,0,0,0,1,1,\n\n\nDuck,d,Bob,0,0,0,0,0,\n")

    assert list(load_records(path)["species"]) == ["Heron", "Duck"]


def test_unquoted_commas_in_comment_are_folded_back(tmp_path):
    path = _write_csv(tmp_path, HEADER + "\nHeron,d,Alice,0,0,0,1,1,by the pond, near reeds\n")

    df = load_records(path)

    assert len(df) == 1
    assert df.iloc[0]["comment"] == "by the pond, near reeds"


def test_overflow_is_folded_and_short_rows_are_padded():
    text = (
        HEADER
        + "\nHeron,d,Alice,0,0,0,1,1,wet, windy, \"cold\" day\n"
        + "Duck,d,Bob,0,0,0,2\n"
        + 'Swan,d,Cara,0,0,0,1,1,"quoted, properly"\n'
    )

    df = load_records(StringIO(text))

    assert list(df["species"]) == ["Heron", "Duck", "Swan"]
    assert df.iloc[0]["comment"] == 'wet, windy, "cold" day'
    assert df.iloc[0]["total"] == 1
    assert df.iloc[1]["adult_count"] == 2
    assert df.iloc[1]["total"] == 0
    assert df.iloc[1]["comment"] == ""
    assert df.iloc[2]["comment"] == "quoted, properly"


def test_load_records_from_streams():
    text = HEADER + "\nHeron,d,Alice,0,0,0,1,1,\n"

    from_text = load_records(StringIO(text))
    from_bytes = load_records(BytesIO(text.encode("utf-8")))

    assert list(from_text["species"]) == ["Heron"]
    assert list(from_bytes["species"]) == ["Heron"]


def test_header_only_file_gives_empty_record_set(tmp_path):
    path = _write_csv(tmp_path, HEADER + "\n")

    df = load_records(path)

    assert df.empty
    assert list(df.columns) == list(RECORD_FIELDS)


def test_missing_file_raises_load_error(tmp_path):
    with pytest.raises(LoadError) as exc:
        load_records(tmp_path / "nope.csv")
    assert "nope.csv" in exc.value.source


def test_empty_file_raises_load_error(tmp_path):
    path = _write_csv(tmp_path, "")
    with pytest.raises(LoadError):
        load_records(path)


def test_unrecognised_header_raises_load_error(tmp_path):
    path = _write_csv(tmp_path, "a,b,c\n1,2,3\n")
    with pytest.raises(LoadError, match="No recognised observation columns"):
        load_records(path)


def test_undecodable_file_raises_load_error(tmp_path):
    path = tmp_path / "binary.csv"
    path.write_bytes(b"\xff\xfe\xfa\x00\x81")
    with pytest.raises(LoadError):
        load_records(path)
