"""Company records from the FactPages ``company`` table."""

from __future__ import annotations

from dataclasses import dataclass

from core.types import Tokens
from ingest.coercion import require, to_boolean, to_date
from records.base import NpdRecord

NAME_INDEX = 0
ORGANIZATION_NUMBER_INDEX = 1
SHORT_NAME_INDEX = 2
NATION_CODE_INDEX = 3
SURVEY_PREFIX_INDEX = 4
NPDID_INDEX = 5
IS_CURRENT_LICENSE_OPERATOR_INDEX = 6
IS_FORMER_LICENSE_OPERATOR_INDEX = 7
IS_CURRENT_LICENSE_LICENSEE_INDEX = 8
IS_FORMER_LICENSE_LICENSEE_INDEX = 9
DATE_SYNCED_INDEX = 10
COLUMN_COUNT = 11


@dataclass(frozen=True, eq=False, kw_only=True)
class NpdCompany(NpdRecord):
    """A company as modeled by the NPD.

    Attributes:
        organization_number: Official Norwegian organisation number.
        short_name: Company short name.
        nation_code: Two letter ISO code of the nation of registration.
        survey_prefix: Prefix of survey names, e.g. ``ST`` in ``ST14001``.
        is_current_license_operator: Company operates a licence today.
        is_former_license_operator: Company operated a licence earlier.
        is_current_license_licensee: Company holds a licence share today.
        is_former_license_licensee: Company held a licence share earlier.
    """

    RECORD_TYPE = "company"

    organization_number: str | None = None
    short_name: str | None = None
    nation_code: str | None = None
    survey_prefix: str | None = None
    is_current_license_operator: bool | None = None
    is_former_license_operator: bool | None = None
    is_current_license_licensee: bool | None = None
    is_former_license_licensee: bool | None = None


def new_company(tokens: Tokens) -> NpdCompany:
    """Build a company from one row of the company table.

    Raises:
        CoercionError: If a required or typed column is invalid.
    """
    return NpdCompany(
        npd_id=require(tokens[NPDID_INDEX], "cmpNpdidCompany"),
        name=require(tokens[NAME_INDEX], "cmpLongName"),
        organization_number=tokens[ORGANIZATION_NUMBER_INDEX],
        short_name=tokens[SHORT_NAME_INDEX],
        nation_code=tokens[NATION_CODE_INDEX],
        survey_prefix=tokens[SURVEY_PREFIX_INDEX],
        is_current_license_operator=to_boolean(tokens[IS_CURRENT_LICENSE_OPERATOR_INDEX]),
        is_former_license_operator=to_boolean(tokens[IS_FORMER_LICENSE_OPERATOR_INDEX]),
        is_current_license_licensee=to_boolean(tokens[IS_CURRENT_LICENSE_LICENSEE_INDEX]),
        is_former_license_licensee=to_boolean(tokens[IS_FORMER_LICENSE_LICENSEE_INDEX]),
        sync_date=to_date(tokens[DATE_SYNCED_INDEX]),
    )
