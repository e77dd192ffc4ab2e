import pytest
import yaml

from rsv.catalog import Catalog, SchemaRecord, parse_catalog
from rsv.core.logging import configure_logging
from rsv.validator import SchemaValidator


DEMO_RECORDS = [
    {
        "namespace": "demo",
        "name": "lead",
        "type": "object",
        "fields": [
            {"name": "name", "type": "String"},
            {"name": "age", "type": "Integer"},
            {"name": "tags", "type": "String[]"},
        ],
        "required": ["name"],
    },
]

# A small CRM-like catalog exercising every category
CRM_RECORDS = [
    {
        "namespace": "schema.omp",
        "name": "lead",
        "type": "object",
        "fields": [
            {"name": "id", "type": "BigInteger"},
            {"name": "email", "type": "String", "rule": "$REGEX$^[a-z]+@[a-z]+\\.com$"},
            {"name": "status", "type": "String", "rule": "$NOT_EQUAL$deleted"},
            {"name": "score", "type": "Double"},
            {"name": "active", "type": "Boolean"},
            {"name": "created", "type": "OffsetDateTime"},
            {"name": "owner", "type": "schema.omp.user"},
            {"name": "contacts", "type": "schema.omp.contact[]"},
            {"name": "history", "type": "schema.omp.events"},
            {"name": "batches", "type": "schema.omp.events[]"},
        ],
        "required": ["id", "email", "$REGEX$^own.*$"],
    },
    {
        "namespace": "schema.omp",
        "name": "user",
        "type": "object",
        "fields": [
            {"name": "login", "type": "String", "rule": "$REGEX$^[a-z]+$"},
            {"name": "level", "type": "Integer"},
        ],
        "required": ["login"],
    },
    {
        "namespace": "schema.omp",
        "name": "contact",
        "type": "object",
        "fields": [
            {"name": "phone", "type": "String"},
            {"name": "kind", "type": "String", "rule": "$EQUAL$primary"},
        ],
        "required": ["phone"],
    },
    {
        "namespace": "schema.omp",
        "name": "events",
        "type": "array",
        "fields": [
            {"name": "at", "type": "OffsetDateTime"},
            {"name": "what", "type": "String"},
        ],
        "required": ["at"],
    },
]


@pytest.fixture(autouse=True, scope="session")
def quiet_logging():
    configure_logging(level="silent", force=True)


@pytest.fixture
def demo_catalog() -> Catalog:
    return parse_catalog(DEMO_RECORDS)


@pytest.fixture
def crm_catalog() -> Catalog:
    return parse_catalog(CRM_RECORDS)


@pytest.fixture
def demo_validator(demo_catalog) -> SchemaValidator:
    return SchemaValidator(demo_catalog)


@pytest.fixture
def crm_validator(crm_catalog) -> SchemaValidator:
    return SchemaValidator(crm_catalog)


@pytest.fixture
def crm_schema_file(tmp_path):
    """CRM catalog written as a YAML definition file."""
    path = tmp_path / "crm.yaml"
    path.write_text(yaml.safe_dump(CRM_RECORDS))
    return path


@pytest.fixture
def valid_lead() -> dict:
    return {
        "id": "9007199254740993",
        "email": "bob@example.com",
        "status": "open",
        "score": 12.5,
        "active": True,
        "created": "2021-01-01T00:00:00+00:00",
        "owner": {"login": "alice", "level": 3},
        "contacts": [
            {"phone": "555-0100", "kind": "primary"},
            {"phone": "555-0101"},
        ],
        "history": [
            {"at": "2021-02-01T10:00:00Z", "what": "created"},
            {"at": "2021-02-02T10:00:00-05:00"},
        ],
        "batches": [
            [{"at": "2021-03-01T00:00:00+01:00"}],
            [{"at": "2021-03-02T00:00:00+01:00"}, {"at": "2021-03-03T00:00:00+01:00"}],
        ],
    }


@pytest.fixture
def make_record():
    """Build a record from a {field: type} or {field: (type, rule)} mapping."""
    return _make_record


def _make_record(name: str, fields: dict, required=(), shape: str = "object", namespace: str = "t") -> SchemaRecord:
    specs = []
    for field_name, declared in fields.items():
        type_name, rule = declared if isinstance(declared, tuple) else (declared, None)
        specs.append({"name": field_name, "type": type_name, "rule": rule})
    return SchemaRecord.model_validate({
        "namespace": namespace,
        "name": name,
        "type": shape,
        "fields": specs,
        "required": list(required),
    })
