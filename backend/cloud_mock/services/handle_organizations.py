"""Organizations handler: fixed two-entry page with a null cursor."""

from cloud_mock.schemas.organization import (
    Organization, OrganizationList, OrganizationType,
)

FIXED_TIMESTAMP = "2024-01-01T00:00:00Z"


def list_organizations() -> OrganizationList:
    return OrganizationList(
        organizations=[
            Organization(
                id="org_1", name="Test Organization 1",
                type=OrganizationType.STANDARD,
                created_at=FIXED_TIMESTAMP, updated_at=FIXED_TIMESTAMP,
            ),
            Organization(
                id="org_2", name="Test Organization 2",
                type=OrganizationType.ENTERPRISE,
                created_at=FIXED_TIMESTAMP, updated_at=FIXED_TIMESTAMP,
            ),
        ],
        next_page=None,
    )
