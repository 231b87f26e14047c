"""Domain word lists consulted by the miners.

Miners receive them as an ``ExtractionVocabulary``; settings may extend the
known tables and field prefixes.
"""

from dataclasses import dataclass, replace

from bo_extractor.config.settings import Settings

FIELD_PREFIXES: frozenset[str] = frozenset(
    {
        "srq",  # service request
        "wov",  # works order version
        "wor",  # works order
        "con",  # contractor
        "ivi",  # inspection visit
        "ins",  # inspection
        "pro",  # property
        "adr",  # address
        "aun",  # admin unit
        "tcy",  # tenancy
        "rac",  # revenue account
        "tra",  # transaction
    }
)

KNOWN_TABLES: frozenset[str] = frozenset(
    {
        "admin_units",
        "admin_groupings",
        "properties",
        "prop_groupings",
        "addresses",
        "address_elements",
        "tenancies",
        "tenancy_instances",
        "revenue_accounts",
        "account_balances",
        "transactions",
        "batch_runs",
        "payment_methods",
        "service_requests",
        "works_orders",
        "works_order_versions",
        "inspection_visits",
        "inspection_results",
        "inspections",
        "contractors",
        "job_roles",
        "interested_parties",
        "household_persons",
        "parties",
        "users",
        "first_ref_values",
        "parameter_values",
        "schedule_of_rates",
        "sor_prices",
        "arrears_actions",
        "contact_details",
        "summary_rents",
        "pp_applications",
        "pp_events",
        "status_codes",
        "dual",
    }
)

NOISE_WORDS: frozenset[str] = frozenset(
    {
        "the",
        "from",
        "above",
        "below",
        "flat",
        "roof",
        "wall",
        "door",
        "bathroom",
        "kitchen",
        "toilet",
        "boiler",
    }
)

# Canonical casing is what ends up in the extracted formula text.
FORMULA_FUNCTIONS: tuple[str, ...] = (
    "Year",
    "Month",
    "Sum",
    "Count",
    "Max",
    "Min",
    "Avg",
    "If",
)


@dataclass(frozen=True)
class ExtractionVocabulary:
    field_prefixes: frozenset[str] = FIELD_PREFIXES
    known_tables: frozenset[str] = KNOWN_TABLES
    noise_words: frozenset[str] = NOISE_WORDS
    formula_functions: tuple[str, ...] = FORMULA_FUNCTIONS

    def extended(
        self,
        *,
        known_tables: list[str] | None = None,
        field_prefixes: list[str] | None = None,
    ) -> "ExtractionVocabulary":
        """Return a copy with additional tables and/or field prefixes."""
        return replace(
            self,
            known_tables=self.known_tables | {t.lower() for t in known_tables or []},
            field_prefixes=self.field_prefixes | {p.lower() for p in field_prefixes or []},
        )


DEFAULT_VOCABULARY = ExtractionVocabulary()


def vocabulary_from_settings(settings: Settings) -> ExtractionVocabulary:
    """Build the default vocabulary extended with configured additions."""
    return DEFAULT_VOCABULARY.extended(
        known_tables=settings.extra_known_tables,
        field_prefixes=settings.extra_field_prefixes,
    )
