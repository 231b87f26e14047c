from bo_extractor.extraction.metadata_miners import (
    has_macro_code,
    is_likely_garbage,
    mine_formulas,
    mine_parameters,
    mine_tables,
)
from bo_extractor.extraction.vocabulary import ExtractionVocabulary


class TestParameters:
    def test_deduplicates_in_first_seen_order(self) -> None:
        text = "@prompt('Start Date') x @prompt('End Date') y @prompt('Start Date')"
        assert mine_parameters(text) == ["Start Date", "End Date"]

    def test_prompt_keyword_is_case_insensitive(self) -> None:
        assert mine_parameters("@PROMPT ( 'Region','A',,mono,free)") == ["Region"]

    def test_prompt_text_is_case_sensitive(self) -> None:
        assert mine_parameters("@prompt('Region') @prompt('region')") == ["Region", "region"]

    def test_empty_prompt_text_is_ignored(self) -> None:
        assert mine_parameters("@prompt('')") == []


class TestFormulas:
    def test_uses_canonical_function_name(self) -> None:
        text = "=Sum(<Revenue>) = count (<Jobs>) =SUM(<Revenue>)"
        assert mine_formulas(text) == ["Sum(<Revenue>)", "Count(<Jobs>)", "Sum(<Revenue>)"]

    def test_unknown_function_is_ignored(self) -> None:
        assert mine_formulas("=Median(<Rent>)") == []

    def test_requires_equals_sign(self) -> None:
        assert mine_formulas("Year(<Raised Date>)") == []

    def test_every_known_function(self) -> None:
        text = " ".join(
            f"={name}(<x>)" for name in ("year", "month", "sum", "count", "max", "min", "avg", "if")
        )
        assert mine_formulas(text) == [
            "Year(<x>)",
            "Month(<x>)",
            "Sum(<x>)",
            "Count(<x>)",
            "Max(<x>)",
            "Min(<x>)",
            "Avg(<x>)",
            "If(<x>)",
        ]

    def test_empty_function_list_finds_nothing(self) -> None:
        vocabulary = ExtractionVocabulary(formula_functions=())
        assert mine_formulas("=Sum(<Revenue>)", vocabulary) == []


class TestTables:
    def test_known_and_underscored_tables_are_sorted(self) -> None:
        corpus = "SELECT w.ref JOIN works_orders w JOIN Contractors c JOIN custom_table x FROM"
        assert mine_tables(corpus) == ["contractors", "custom_table", "works_orders"]

    def test_unknown_table_without_underscore_is_rejected(self) -> None:
        assert mine_tables("SELECT a JOIN customers c FROM") == []

    def test_deduplicates(self) -> None:
        assert mine_tables("SELECT a JOIN users JOIN dual JOIN USERS FROM") == ["dual", "users"]

    def test_span_boundary_is_not_a_table(self) -> None:
        corpus = "SELECT a FROM\nSELECT b JOIN tenancies t FROM"
        assert mine_tables(corpus) == ["tenancies"]

    def test_garbage_identifiers_are_rejected(self) -> None:
        corpus = "JOIN x_ JOIN t_1234567 JOIN " + "a_" + "b" * 40
        assert mine_tables(corpus) == []

    def test_extended_known_tables(self) -> None:
        vocabulary = ExtractionVocabulary().extended(known_tables=["LegacyJobs"])
        assert mine_tables("SELECT a JOIN legacyjobs FROM", vocabulary) == ["legacyjobs"]


class TestLikelyGarbage:
    def test_too_short(self) -> None:
        assert is_likely_garbage("ab")

    def test_too_long(self) -> None:
        assert is_likely_garbage("a" * 41)

    def test_numeric(self) -> None:
        assert is_likely_garbage("123")

    def test_long_digit_run(self) -> None:
        assert is_likely_garbage("t_123456")

    def test_noise_word_any_case(self) -> None:
        assert is_likely_garbage("Kitchen")

    def test_plausible_name(self) -> None:
        assert not is_likely_garbage("works_orders")
        assert not is_likely_garbage("t_12345")


class TestMacroCode:
    def test_sub_declaration(self) -> None:
        assert has_macro_code("Sub Main()")

    def test_function_declaration(self) -> None:
        assert has_macro_code("Public Function Calc(x)")

    def test_end_sub(self) -> None:
        assert has_macro_code("... End   Sub")

    def test_is_case_sensitive(self) -> None:
        assert not has_macro_code("sub main end sub")

    def test_words_containing_sub_do_not_match(self) -> None:
        assert not has_macro_code("Subtotal rows End Subs")
