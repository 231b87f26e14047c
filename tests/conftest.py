import pytest


@pytest.fixture()
def sample_report_bytes() -> bytes:
    """A small report: binary header, one labelled query, a prompt and a formula."""
    text = (
        "\x00\x03DOCBO\x00\x00\x12"
        'SELECT aun.code "Admin Unit", prop.ref_no "Property Reference", '
        'tcy.start_date "Tenancy Start" FROM properties prop, tenancies tcy '
        "WHERE prop.ref_no = tcy.prop_ref AND prop.status = 'A' "
        "AND tcy.end_date IS NULL "
        "AND tcy.start_date >= @prompt('Start Date','D',,mono,free) ORDER BY 1\n"
        "\x00\x00=Year(<Tenancy Start>)\x00\x01"
        "\x00tcy_start_date\x00pro_ref_no\x00tcy_start_date\x00"
    )
    return text.encode("utf-8")


@pytest.fixture()
def complex_report_bytes() -> bytes:
    """40 labelled fields, 3 distinct prompts, 2 formulas, 5 joined tables and macro code."""
    fields = "".join(f', t.col{i} "Field {i}"' for i in range(40))
    joins = (
        " JOIN works_orders w JOIN contractors c JOIN service_requests s"
        " JOIN inspections i JOIN properties p"
    )
    text = (
        '\x00\x00SELECT t.id "Id"' + fields + joins + " FROM dual\x00"
        "@prompt('Start Date','D',,mono,free) @prompt('End Date','D',,mono,free) "
        "@prompt('Region','A',,multi,free) @prompt('Start Date','D',,mono,free)\x00"
        "=Sum(<Revenue>)\x00=Year(<Raised Date>)\x00"
        "Sub Refresh_Data()\x00End Sub\x00"
    )
    return text.encode("utf-8")


@pytest.fixture()
def binary_only_bytes() -> bytes:
    """Structure bytes with no recognizable query."""
    return b"\x00\x01\x02\xff\xfe\x89PNG\x00\x00 layout block 42 \x00\x1f\x7f"
