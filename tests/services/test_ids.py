"""Tests for IdService."""

from datetime import UTC, datetime

import pytest

from nsid.config.models import GenerateConfig
from nsid.domain.ids import parse
from nsid.services.ids import IdService, describe

KNOWN_DATE = datetime(2022, 2, 11, 17, 17, 38, tzinfo=UTC)
KNOWN_ID = "user_24yPTDCR1QRPZITB83lxvgcz7KI"


@pytest.fixture
def service() -> IdService:
    return IdService()


class TestGenerate:
    def test_single(self, service: IdService) -> None:
        result = service.generate("user")
        assert result.ok
        assert result.op == "generate"
        assert result.data["namespace"] == "user"
        assert len(result.data["ids"]) == 1
        assert parse(result.data["ids"][0]).namespace == "user"

    def test_count(self, service: IdService) -> None:
        result = service.generate("order", count=25)
        assert result.ok
        assert len(set(result.data["ids"])) == 25

    def test_pinned_time(self, service: IdService) -> None:
        result = service.generate("user", at=KNOWN_DATE)
        assert parse(result.data["ids"][0]).date == KNOWN_DATE

    def test_invalid_namespace(self, service: IdService) -> None:
        result = service.generate("User")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_NAMESPACE"
        assert result.error.detail == {"namespace": "User"}

    def test_invalid_timestamp(self, service: IdService) -> None:
        result = service.generate("user", at=datetime(1999, 1, 1, tzinfo=UTC))
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_TIMESTAMP"

    def test_default_namespace(self) -> None:
        service = IdService(GenerateConfig(default_namespace="team"))
        result = service.generate()
        assert result.ok
        assert result.data["namespace"] == "team"

    def test_explicit_namespace_beats_default(self) -> None:
        service = IdService(GenerateConfig(default_namespace="team"))
        assert service.generate("user").data["namespace"] == "user"

    def test_empty_namespace_is_not_replaced_by_default(self) -> None:
        service = IdService(GenerateConfig(default_namespace="team"))
        result = service.generate("")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_NAMESPACE"

    def test_no_namespace(self, service: IdService) -> None:
        result = service.generate()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_NAMESPACE"

    @pytest.mark.parametrize("count", [0, -1, 11])
    def test_count_bounds(self, count: int) -> None:
        service = IdService(GenerateConfig(max_count=10))
        result = service.generate("user", count=count)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "COUNT_EXCEEDED"
        assert result.error.detail["max_count"] == 10

    def test_max_count_allowed(self) -> None:
        service = IdService(GenerateConfig(max_count=10))
        assert service.generate("user", count=10).ok


class TestBuild:
    def test_known_value(self, service: IdService) -> None:
        result = service.build("person", KNOWN_DATE, "76e8fbc01cd81a5b6120178d5d76e9fe")
        assert result.ok
        assert result.data["id"] == "person_24yPTDCR1QRPZITB83lxvgcz7KI"

    def test_bad_hex(self, service: IdService) -> None:
        result = service.build("person", KNOWN_DATE, "not-hex")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PAYLOAD"

    def test_wrong_length(self, service: IdService) -> None:
        result = service.build("person", KNOWN_DATE, "abcd")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_PAYLOAD_LENGTH"
        assert result.error.detail == {"length": 2, "expected": 16}


class TestInspect:
    def test_fields(self, service: IdService) -> None:
        result = service.inspect(KNOWN_ID)
        assert result.ok
        assert result.data == {
            "id": KNOWN_ID,
            "namespace": "user",
            "timestamp": 0x0E944C32,
            "date": "2022-02-11T17:17:38+00:00",
            "payload": "76e8fbc01cd81a5b6120178d5d76e9fe",
            "raw": "0e944c3276e8fbc01cd81a5b6120178d5d76e9fe",
        }

    def test_describe_matches_inspect(self, service: IdService) -> None:
        assert service.inspect(KNOWN_ID).data == describe(parse(KNOWN_ID))

    def test_malformed(self, service: IdService) -> None:
        result = service.inspect("user_nope")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_ID"
        assert result.error.detail["value"] == "user_nope"


class TestValidate:
    def test_valid(self, service: IdService) -> None:
        result = service.validate(KNOWN_ID)
        assert result.ok
        assert result.data["valid"] is True

    def test_namespace_match(self, service: IdService) -> None:
        assert service.validate(KNOWN_ID, namespace="user").ok

    def test_namespace_mismatch(self, service: IdService) -> None:
        result = service.validate(KNOWN_ID, namespace="team")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NAMESPACE_MISMATCH"
        assert result.error.detail == {"expected": "team", "actual": "user"}

    def test_missing_separator(self, service: IdService) -> None:
        result = service.validate("user")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_ID"


class TestCompare:
    def test_before(self, service: IdService) -> None:
        early = service.build("user", KNOWN_DATE, "00" * 16).data["id"]
        late = service.build("user", KNOWN_DATE.replace(year=2023), "00" * 16).data["id"]
        result = service.compare(early, late)
        assert result.ok
        assert result.data["order"] == -1
        assert result.data["relation"] == "before"
        assert service.compare(late, early).data["relation"] == "after"
        assert service.compare(early, early).data["relation"] == "equal"

    def test_namespace_mismatch(self, service: IdService) -> None:
        result = service.compare(KNOWN_ID, "team_24yPTDCR1QRPZITB83lxvgcz7KI")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NAMESPACE_MISMATCH"


class TestSort:
    def test_chronological(self, service: IdService) -> None:
        years = [2024, 2019, 2022, 2020]
        values = [
            service.build("user", KNOWN_DATE.replace(year=y), "ab" * 16).data["id"] for y in years
        ]
        result = service.sort(values)
        assert result.ok
        assert [parse(v).date.year for v in result.data["ids"]] == sorted(years)
        assert result.warnings == []

    def test_single(self, service: IdService) -> None:
        assert service.sort([KNOWN_ID]).data["ids"] == [KNOWN_ID]

    def test_duplicates_warn(self, service: IdService) -> None:
        result = service.sort([KNOWN_ID, KNOWN_ID])
        assert result.ok
        assert result.warnings == ["Duplicate identifiers in input"]

    def test_mixed_namespaces(self, service: IdService) -> None:
        result = service.sort([KNOWN_ID, "team_24yPTDCR1QRPZITB83lxvgcz7KI"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NAMESPACE_MISMATCH"

    def test_malformed_entry(self, service: IdService) -> None:
        result = service.sort([KNOWN_ID, "garbage"])
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_ID"
