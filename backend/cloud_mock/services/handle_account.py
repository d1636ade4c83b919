"""Account handler: fixed synthetic account."""

from cloud_mock.schemas.account import Account, AccountTrust

ACCOUNT_ID = "test-account-id"


def get_account() -> Account:
    return Account(
        id=ACCOUNT_ID,
        trust=AccountTrust(
            direct_trust=True, external_trust=False, trust_all=True,
        ),
    )
