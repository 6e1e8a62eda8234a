# tests/conftest.py
import pytest

from recordtable.normalizers import get_default_normalizer


# --- Raw records shaped like the project-indicator feed ---
@pytest.fixture
def project_records():
    return [
        {
            "id": 6873,
            "code": "BH-L1056",
            "title": "Lorem ipsum dolor sit amet",
            "loanNumber": "5743/OC-BH",
            "field1": "160000000.00",
            "field7": "SERGIO LACAMBRA AYUSO",
            "field8": "2024-05-04",
            "frontendId": "581-21",
        },
        {
            "id": 6874,
            "code": "BH-L1057",
            "title": "Strengthening Disaster",
            "loanNumber": "5744/OC-BH",
            "field1": "20000000.00",
            "field7": "SERGIO LACAMBRA AYUSO",
            "field8": "2024-05-04",
            "frontendId": "581-21",
        },
    ]


@pytest.fixture
def project_columns():
    headers = ["Proyecto", "Operacion", "Nombre", "Jefe de proyecto", "Date", "Id"]
    keys = ["code", "loanNumber", "title", "field7", "field8", "id"]
    return headers, keys


# --- Rows with ties on `k`; `idx` records the input position ---
@pytest.fixture
def tied_rows():
    return [{"k": 1, "idx": 0}, {"k": 1, "idx": 1}, {"k": 2, "idx": 2}]


@pytest.fixture
def normalizer():
    return get_default_normalizer()
