"""Tests for workspace scanning and result aggregation."""

from __future__ import annotations

import asyncio
import json
from types import MappingProxyType

import pytest

from dep_update_checker.core import CheckerOptions, UpdateChecker, check, scan_workspace
from dep_update_checker.models import CheckResult, UpdateRecord, UpdateType, UpToDateRecord
from dep_update_checker.reference import LATEST_VERSIONS, with_overrides


def _assert_consistent(result: CheckResult) -> None:
    summary = result.summary
    assert summary.total_scanned == len(result.outdated) + len(result.up_to_date)
    assert summary.outdated == len(result.outdated)
    assert summary.up_to_date == len(result.up_to_date)
    assert len(result.outdated) == (
        len(result.major_updates) + len(result.minor_updates) + len(result.patch_updates)
    )
    for bucket in (result.major_updates, result.minor_updates, result.patch_updates):
        for record in bucket:
            assert any(record is r for r in result.outdated)


class TestScanWorkspace:
    def test_single_outdated_lodash(self, workspace, make_project):
        make_project("app", {"lodash": "4.0.0"})
        result = scan_workspace(workspace)

        assert [r.to_dict() for r in result.outdated] == [
            {"package": "lodash", "current": "4.0.0", "latest": "4.17.21", "updateType": "minor"}
        ]
        assert result.minor_updates == result.outdated
        assert result.summary.to_dict() == {"totalScanned": 1, "outdated": 1, "upToDate": 0}
        _assert_consistent(result)

    def test_empty_workspace(self, workspace):
        result = scan_workspace(workspace)
        data = result.to_dict()
        assert data["outdated"] == []
        assert data["upToDate"] == []
        assert data["summary"] == {"totalScanned": 0, "outdated": 0, "upToDate": 0}

    def test_missing_workspace(self, tmp_path):
        result = scan_workspace(tmp_path / "nope")
        assert result.summary.total_scanned == 0

    def test_unknown_packages_not_counted(self, workspace, make_project):
        make_project("app", {"left-pad": "1.0.0", "my-internal-lib": "0.1.0"})
        result = scan_workspace(workspace)
        assert result.outdated == []
        assert result.up_to_date == []
        assert result.summary.total_scanned == 0

    def test_routes_each_severity(self, workspace, make_project):
        make_project(
            "app",
            {"react": "^18.2.0", "axios": "^1.6.0", "ws": "~8.18.0"},
            {"jest": "29.7.0"},
        )
        result = scan_workspace(workspace)

        assert [r.package for r in result.major_updates] == ["react"]
        assert [r.package for r in result.minor_updates] == ["axios"]
        assert [r.package for r in result.patch_updates] == []
        assert [r.to_dict() for r in result.up_to_date] == [
            {"package": "ws", "version": "~8.18.0"},
            {"package": "jest", "version": "29.7.0"},
        ]
        _assert_consistent(result)

    def test_patch_update(self, workspace, make_project):
        make_project("app", {"cors": "2.8.1"})
        result = scan_workspace(workspace)
        assert [r.update_type for r in result.patch_updates] == [UpdateType.PATCH]

    def test_lookup_is_case_insensitive_but_reports_original_name(self, workspace, make_project):
        make_project("app", {"React": "17.0.0"})
        result = scan_workspace(workspace)
        assert result.outdated[0].package == "React"
        assert result.outdated[0].latest == "19.0.0"

    def test_dev_declaration_wins(self, workspace, make_project):
        make_project("app", {"lodash": "4.0.0"}, {"lodash": "4.17.21"})
        result = scan_workspace(workspace)
        assert result.outdated == []
        assert result.up_to_date == [UpToDateRecord(package="lodash", version="4.17.21")]

    def test_counts_per_project(self, workspace, make_project):
        make_project("web", {"react": "19.0.0"})
        make_project("api", {"react": "19.0.0"})
        result = scan_workspace(workspace)
        assert result.summary.total_scanned == 2
        assert result.summary.up_to_date == 2

    def test_excluded_and_hidden_projects_ignored(self, workspace, make_project):
        make_project("dist", {"react": "1.0.0"})
        make_project(".hidden", {"react": "1.0.0"})
        make_project("app", {"react": "19.0.0"})
        result = scan_workspace(workspace)
        assert result.summary.to_dict() == {"totalScanned": 1, "outdated": 0, "upToDate": 1}

    def test_custom_excludes(self, workspace, make_project):
        make_project("dist", {"react": "1.0.0"})
        result = scan_workspace(workspace, exclude_dirs=[])
        assert [r.package for r in result.major_updates] == ["react"]

    def test_broken_manifest_does_not_stop_scan(self, workspace, make_project):
        (workspace / "broken").mkdir()
        (workspace / "broken" / "package.json").write_text("{oops")
        make_project("app", {"vue": "2.7.0"})
        result = scan_workspace(workspace)
        assert [r.package for r in result.major_updates] == ["vue"]

    def test_custom_reference_table(self, workspace, make_project):
        make_project("app", {"left-pad": "1.0.0", "react": "1.0.0"})
        table = MappingProxyType({"left-pad": "1.3.0"})
        result = scan_workspace(workspace, latest_versions=table)
        assert [r.to_dict() for r in result.outdated] == [
            {"package": "left-pad", "current": "1.0.0", "latest": "1.3.0", "updateType": "minor"}
        ]

    def test_within_range_flag(self, workspace, make_project):
        make_project("app", {"axios": "^1.6.0", "lodash": "4.0.0"})
        result = scan_workspace(workspace)
        flags = {r.package: r.within_range for r in result.outdated}
        assert flags == {"axios": True, "lodash": False}

    def test_fresh_result_per_scan(self, workspace, make_project):
        make_project("app", {"lodash": "4.0.0"})
        first = scan_workspace(workspace)
        second = scan_workspace(workspace)
        assert first is not second
        assert first.summary.total_scanned == second.summary.total_scanned == 1

    def test_result_is_json_serialisable(self, workspace, make_project):
        make_project("app", {"lodash": "4.0.0", "react": "19.0.0"})
        payload = json.loads(json.dumps(scan_workspace(workspace).to_dict(extended=True)))
        assert payload["minorUpdates"][0]["withinRange"] is False
        assert payload["upToDate"] == [{"package": "react", "version": "19.0.0"}]


class TestUpdateChecker:
    def test_default_options(self):
        options = CheckerOptions()
        assert options.exclude_dirs == {"node_modules", ".git", "dist"}
        assert options.latest_versions is LATEST_VERSIONS

    def test_methods(self, workspace, make_project):
        make_project("app", {"lodash": "4.0.0"})
        checker = UpdateChecker(CheckerOptions(workspace_path=workspace))
        projects = checker.find_projects()
        assert [p.name for p in projects] == ["app"]
        assert checker.parse_dependencies(projects[0]) == {"lodash": "4.0.0"}
        assert checker.get_update_type("4.0.0", "4.17.21") is UpdateType.MINOR

    def test_async_check(self, workspace, make_project):
        make_project("app", {"lodash": "4.0.0"})
        result = asyncio.run(check(workspace))
        assert result.summary.outdated == 1


class TestReferenceTable:
    def test_is_read_only(self):
        with pytest.raises(TypeError):
            LATEST_VERSIONS["react"] = "0.0.1"  # type: ignore[index]

    def test_keys_lowercase(self):
        assert all(name == name.lower() for name in LATEST_VERSIONS)

    def test_overrides_lowercased_and_layered(self):
        table = with_overrides({"Left-Pad": "1.3.0", "react": "20.0.0"})
        assert table["left-pad"] == "1.3.0"
        assert table["react"] == "20.0.0"
        assert LATEST_VERSIONS["react"] == "19.0.0"


class TestModels:
    def test_update_record_requires_update_type(self):
        with pytest.raises(ValueError):
            UpdateRecord(package="x", current="1", latest="2", update_type="major")  # type: ignore[arg-type]

    def test_update_record_requires_package(self):
        with pytest.raises(ValueError):
            UpdateRecord(package="", current="1", latest="2", update_type=UpdateType.MAJOR)
