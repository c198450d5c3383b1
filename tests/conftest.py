import pytest

from amass import Below, Empty, LongerThan, NotAlpha


@pytest.fixture(scope="function")
def name_checks() -> list:
    return [
        Empty("Name must not be empty"),
        LongerThan(7, "Maximum length of 7 chars exceeded"),
        NotAlpha("name must contain only letters"),
    ]


@pytest.fixture(scope="function")
def age_checks() -> list:
    return [Below(18, "You must be at least 18 to buy beer")]
