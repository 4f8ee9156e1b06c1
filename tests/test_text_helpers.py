import pytest

from boilgen.dbcolumn import ForeignKey
from boilgen.text_helpers import (
    camel_case,
    convert_null_to_primitive,
    is_null_primitive,
    is_primitive,
    plural,
    singular,
    title_case,
    trim_suffixes,
    txt_name_to_many,
    txt_name_to_one,
)


@pytest.mark.parametrize(
    "table,column,unique,foreign_table,foreign_column,local_fn,foreign_fn",
    [
        ("jets", "airport_id", False, "airports", "id", "Jets", "Airport"),
        ("jets", "airport_id", True, "airports", "id", "Jet", "Airport"),
        ("jets", "holiday_id", False, "airports", "id", "HolidayJets", "Holiday"),
        ("jets", "holiday_id", True, "airports", "id", "HolidayJet", "Holiday"),
        ("jets", "holiday_airport_id", False, "airports", "id", "HolidayAirportJets", "HolidayAirport"),
        ("jets", "holiday_airport_id", True, "airports", "id", "HolidayAirportJet", "HolidayAirport"),
        ("jets", "jet_id", False, "jets", "id", "Jets", "Jet"),
        ("jets", "jet_id", True, "jets", "id", "Jet", "Jet"),
        ("jets", "plane_id", False, "jets", "id", "PlaneJets", "Plane"),
        ("jets", "plane_id", True, "jets", "id", "PlaneJet", "Plane"),
        ("videos", "user_id", False, "users", "id", "Videos", "User"),
        ("videos", "producer_id", False, "users", "id", "ProducerVideos", "Producer"),
        ("videos", "user_id", True, "users", "id", "Video", "User"),
        ("videos", "producer_id", True, "users", "id", "ProducerVideo", "Producer"),
        ("videos", "user", False, "users", "id", "Videos", "VideoUser"),
        ("videos", "created_by", False, "users", "id", "CreatedByVideos", "CreatedByUser"),
        ("videos", "director", False, "users", "id", "DirectorVideos", "DirectorUser"),
        ("videos", "user", True, "users", "id", "Video", "VideoUser"),
        ("videos", "created_by", True, "users", "id", "CreatedByVideo", "CreatedByUser"),
        ("videos", "director", True, "users", "id", "DirectorVideo", "DirectorUser"),
        ("industries", "industry_id", False, "industries", "id", "Industries", "Industry"),
        ("industries", "parent_id", False, "industries", "id", "ParentIndustries", "Parent"),
        ("industries", "industry_id", True, "industries", "id", "Industry", "Industry"),
        ("industries", "parent_id", True, "industries", "id", "ParentIndustry", "Parent"),
        ("race_result_scratchings", "results_id", False, "race_results", "id",
         "ResultRaceResultScratchings", "Result"),
    ],
)
def test_txt_name_to_one(table, column, unique, foreign_table, foreign_column, local_fn, foreign_fn):
    fk = ForeignKey(
        table=table,
        column=column,
        unique=unique,
        foreign_table=foreign_table,
        foreign_column=foreign_column,
        foreign_column_unique=True,
    )
    assert txt_name_to_one(fk) == (local_fn, foreign_fn)


@pytest.mark.parametrize(
    "lhs_table,lhs_column,rhs_table,rhs_column,lhs_fn,rhs_fn",
    [
        ("pilots", "pilot_id", "languages", "language_id", "Pilots", "Languages"),
        ("pilots", "captain_id", "languages", "tongue_id", "CaptainPilots", "TongueLanguages"),
        ("pilots", "pilot_id", "pilots", "mentor_id", "Pilots", "MentorPilots"),
        ("pilots", "mentor_id", "pilots", "pilot_id", "MentorPilots", "Pilots"),
        ("pilots", "captain_id", "pilots", "mentor_id", "CaptainPilots", "MentorPilots"),
        ("videos", "video_id", "tags", "tag_id", "Videos", "Tags"),
        ("tags", "tag_id", "videos", "video_id", "Tags", "Videos"),
    ],
)
def test_txt_name_to_many(lhs_table, lhs_column, rhs_table, rhs_column, lhs_fn, rhs_fn):
    lhs = ForeignKey(foreign_table=lhs_table, column=lhs_column)
    rhs = ForeignKey(foreign_table=rhs_table, column=rhs_column)
    assert txt_name_to_many(lhs, rhs) == (lhs_fn, rhs_fn)


@pytest.mark.parametrize("suffix", ["_id", "_uuid", "_guid", "_oid"])
def test_trim_suffixes(suffix):
    assert trim_suffixes("hello" + suffix) == "hello"


def test_trim_suffixes_only_one():
    assert trim_suffixes("a_id_id") == "a_id"
    assert trim_suffixes("plain") == "plain"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("videos", "Videos"),
        ("user_id", "UserID"),
        ("1number", "1number"),
        ("holiday_airport", "HolidayAirport"),
        ("__a__b", "AB"),
    ],
)
def test_title_case(name, expected):
    assert title_case(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [("videos", "videos"), ("user_id", "userID"), ("race_results", "raceResults")],
)
def test_camel_case(name, expected):
    assert camel_case(name) == expected


@pytest.mark.parametrize(
    "word,expected",
    [
        ("industry", "industries"),
        ("video", "videos"),
        ("videos", "videos"),
        ("race_result", "race_results"),
        ("person", "people"),
        ("sheep", "sheep"),
        ("address", "addresses"),
    ],
)
def test_plural(word, expected):
    assert plural(word) == expected


@pytest.mark.parametrize(
    "word,expected",
    [
        ("industries", "industry"),
        ("videos", "video"),
        ("race_results", "race_result"),
        ("ones", "one"),
        ("people", "person"),
        ("created_by", "created_by"),
        ("status", "status"),
    ],
)
def test_singular(word, expected):
    assert singular(word) == expected


def test_primitives():
    assert is_primitive("int64")
    assert not is_primitive("null.Int64")
    assert is_null_primitive("null.String")
    assert not is_null_primitive("string")


@pytest.mark.parametrize(
    "typ,expected",
    [("null.Int64", "int64"), ("null.String", "string"), ("time.Time", "time.Time")],
)
def test_convert_null_to_primitive(typ, expected):
    assert convert_null_to_primitive(typ) == expected