"""
Unit tests for the line parser: movies, series, classification and error kinds.
"""

import pytest

from medialib.categories import Category
from medialib.errors import (
	BadCategory,
	BadEndYear,
	BadRating,
	BadReleaseYear,
	BadSeasonNumber,
	BadSeasonToken,
	ParseError,
	PrematureEnd,
	SeasonOutOfOrder,
	TrailingContent,
)
from medialib.media_parser import MediaParser, parse_line
from medialib.models import Movie, Series

OFFICE_SEASONS = "1-6, 2-22, 3-25, 4-19, 5-28, 6-26, 7-26, 8-24, 9-25"
OFFICE_LENGTHS = (6, 22, 25, 19, 28, 26, 26, 24, 25)


def test_comment_lines_are_ignored():
	assert parse_line("// This is a comment") is None
	assert parse_line("//The Matrix; 19a99; nonsense") is None
	assert parse_line("//") is None


def test_movie_general():
	m = parse_line("The Matrix; 1999; Action, Sci-fi; 8.7;")
	assert m == Movie("The Matrix", 1999, (Category.Action, Category.SciFi), 8.7)
	assert m.kind == "movie"


def test_movie_decimal_comma_rating():
	m = parse_line("The Godfather; 1972; Crime, Drama; 9,2;")
	assert m.rating == 9.2


def test_movie_rating_with_exponent():
	assert parse_line("X; 1999; Action; 8e0;").rating == 8.0
	assert parse_line("X; 1999; Action; 87E-1;").rating == 8.7
	assert parse_line("X; 1999; Action; 0,87e+1;").rating == 8.7


def test_movie_keeps_category_order_and_duplicates():
	m = parse_line("Odd; 2001; drama, ACTION, Drama; 5.0;")
	assert m.categories == (Category.Drama, Category.Action, Category.Drama)


def test_title_is_trimmed():
	m = parse_line("   Spaced Out  ; 2010; Comedy; 6.1;")
	assert m.title == "Spaced Out"


def test_empty_title_is_accepted():
	m = parse_line(" ; 2010; Comedy; 6.1;")
	assert isinstance(m, Movie)
	assert m.title == ""


def test_trailing_whitespace_after_movie_is_fine():
	m = parse_line("The Matrix; 1999; Action; 8.7;   \r")
	assert isinstance(m, Movie)


def test_series_general():
	s = parse_line(f"The Office; 2005-2013; Comedy; 8.9; {OFFICE_SEASONS};")
	assert s == Series("The Office", 2005, (Category.Comedy,), 8.9, True, 2013, OFFICE_LENGTHS)
	assert s.kind == "series"


def test_series_seasons_match_positions():
	s = parse_line("The Office; 2005-2013; Comedy; 8.9; 1-6, 2-22;")
	assert s.is_ended is True
	assert s.end_year == 2013
	assert s.season_lengths == (6, 22)


def test_series_still_running_with_dash():
	s = parse_line(f"The Office; 2005-; Comedy; 8.9; {OFFICE_SEASONS};")
	assert isinstance(s, Series)
	assert s.is_ended is False
	assert s.end_year == 0
	assert s.season_lengths == OFFICE_LENGTHS


def test_series_still_running_with_blank_end_year():
	s = parse_line("The Office; 2005 -   ; Comedy; 8.9; 1-6;")
	assert s.is_ended is False


def test_series_without_dash_is_classified_by_seasons():
	s = parse_line(f"The Office; 2005; Comedy; 8.9; {OFFICE_SEASONS};")
	assert s == Series("The Office", 2005, (Category.Comedy,), 8.9, False, 0, OFFICE_LENGTHS)


def test_same_line_without_seasons_is_a_movie():
	m = parse_line("The Office; 2005; Comedy; 8.9;")
	assert isinstance(m, Movie)


def test_unterminated_season_list_without_dash_is_series():
	s = parse_line("The Office; 2005; Comedy; 8.9; 1-6,")
	assert isinstance(s, Series)
	assert s.season_lengths == (6,)
	assert s.is_ended is False


def test_category_lookup_uses_display_strings():
	s = parse_line("Late Night; 1990-1999; Talk-show, film-noir; 7.0; 1-100;")
	assert s.categories == (Category.TalkShow, Category.FilmNoir)


def test_parser_is_deterministic():
	parser = MediaParser()
	line = "Alien; 1979; Horror, Sci-fi; 8.5;"
	assert parser.parse(line) == parser.parse(line) == parse_line(line)


# Error kinds

def test_invalid_release_year():
	with pytest.raises(BadReleaseYear) as movie_err:
		parse_line("The Matrix; 19a99; Action, Sci-fi; 8.7;")
	assert movie_err.value.fragment == "19a99"
	assert movie_err.value.line == "The Matrix; 19a99; Action, Sci-fi; 8.7;"

	with pytest.raises(BadReleaseYear) as series_err:
		parse_line(f"The Office; 20a05-20a13; Comedy; 8.9; {OFFICE_SEASONS};")
	assert series_err.value.fragment == "20a05"


def test_invalid_end_year():
	with pytest.raises(BadEndYear) as err:
		parse_line("The Office; 2005-20a13; Comedy; 8.9; 1-6;")
	assert err.value.fragment == "20a13"


def test_invalid_category():
	with pytest.raises(BadCategory) as movie_err:
		parse_line("The Matrix; 1999; aAction; 8.7;")
	assert movie_err.value.fragment == "aAction"

	with pytest.raises(BadCategory):
		parse_line(f"The Office; 2005-2013; ComedyA; 8.9; {OFFICE_SEASONS};")


def test_category_identifier_is_not_a_display_string():
	with pytest.raises(BadCategory):
		parse_line("The Matrix; 1999; SciFi; 8.7;")


def test_invalid_rating():
	with pytest.raises(BadRating) as movie_err:
		parse_line("The Matrix; 1999; Action, Sci-fi; 8a.7;")
	assert movie_err.value.fragment == "8a.7"

	with pytest.raises(BadRating):
		parse_line(f"The Office; 2005-2013; Comedy; 8.a9; {OFFICE_SEASONS};")

	for bad in ("nan", "inf", "1_0", "8e", "e5"):
		with pytest.raises(BadRating):
			parse_line(f"The Matrix; 1999; Action; {bad};")


def test_missing_data_movie():
	with pytest.raises(PrematureEnd) as err:
		parse_line("The Matrix; 1999; Action, Sci-fi;")
	assert err.value.classification == "unknown"


def test_missing_data_series():
	with pytest.raises(PrematureEnd) as err:
		parse_line("The Office; 2005-2013; Comedy; 8.9;")
	assert err.value.classification == "series"


def test_line_without_separators_ends_prematurely():
	with pytest.raises(PrematureEnd):
		parse_line("Just a title")


def test_invalid_season_number():
	with pytest.raises(BadSeasonNumber) as err:
		parse_line(f"The Office; 2005-2013; Comedy; 8.9; 1a-6, 2-22, 3-25;")
	assert err.value.fragment == "1a-6"

	with pytest.raises(BadSeasonNumber):
		parse_line("The Office; 2005-2013; Comedy; 8.9; 1-six;")


def test_season_token_without_separator():
	with pytest.raises(BadSeasonToken) as err:
		parse_line("The Office; 2005-2013; Comedy; 8.9; 1-6, 22;")
	assert err.value.fragment == "22"


def test_seasons_out_of_order():
	with pytest.raises(SeasonOutOfOrder):
		parse_line("The Office; 2005-2013; Comedy; 8.9; 1-6, 3-22;")
	with pytest.raises(SeasonOutOfOrder):
		parse_line("The Office; 2005-2013; Comedy; 8.9; 0-6;")


def test_movie_with_extra_field_is_a_bad_season_token():
	# Extra fields after a movie's rating are read as season tokens
	with pytest.raises(BadSeasonToken):
		parse_line("The Matrix; 1999; Action, Sci-fi; 8.7; 8.7;")


def test_trailing_content():
	with pytest.raises(TrailingContent) as err:
		parse_line(f"The Office; 2005-2013; Comedy; 8.9; {OFFICE_SEASONS}; {OFFICE_SEASONS};")
	assert err.value.fragment == f"{OFFICE_SEASONS};"

	with pytest.raises(TrailingContent):
		parse_line("The Matrix; 1999; Action; 8.7; extra")


def test_errors_are_value_errors_with_kind():
	with pytest.raises(ParseError) as err:
		parse_line("The Matrix; 1999; Action; 8a.7;")
	assert isinstance(err.value, ValueError)
	assert err.value.kind == "BadRating"
	assert "8a.7" in str(err.value)
