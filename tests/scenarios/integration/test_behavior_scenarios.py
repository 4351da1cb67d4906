"""Scenario-style integration tests from diff document to findings."""

from __future__ import annotations

from datetime import date

from property_sunset_checker.configuration.runtime_settings import PolicyConfig
from property_sunset_checker.diff_tree import parse_diff_document
from property_sunset_checker.finding_aggregation import aggregate_findings
from property_sunset_checker.findings.finding_models import AnalysisScope, FindingKind

_POLICY = PolicyConfig(grace_period_days={"stable": 30, "beta": 30, "draft": 0})


def _findings(document: str, policy: PolicyConfig = _POLICY):
    return aggregate_findings(parse_diff_document(document), policy)


def test_pet_age_deprecated_with_sunset() -> None:
    findings = _findings(
        """
components:
  schemas:
    Pet:
      properties:
        age:
          deprecated: {to: true}
          extensions:
            x-stability-level: stable
            x-sunset: "2026-12-31"
"""
    )

    assert len(findings) == 1
    assert findings[0].scope == AnalysisScope.component_schema("Pet")
    assert findings[0].property_path == "age"
    assert findings[0].kind == FindingKind.DEPRECATED
    assert findings[0].sunset_date == date(2026, 12, 31)


def test_pet_age_deprecated_without_sunset() -> None:
    findings = _findings(
        """
components:
  schemas:
    Pet:
      properties:
        age:
          deprecated: {to: true}
          extensions:
            x-stability-level: stable
"""
    )

    assert [finding.kind for finding in findings] == [FindingKind.SUNSET_MISSING]


def test_unparseable_sunset_replaces_deprecated_finding() -> None:
    findings = _findings(
        """
components:
  schemas:
    Pet:
      properties:
        age:
          deprecated: {to: true}
          extensions:
            x-stability-level: stable
            x-sunset: not-a-date
"""
    )

    assert [finding.kind for finding in findings] == [FindingKind.SUNSET_UNPARSEABLE]


def test_unquoted_impossible_sunset_date_is_reported_as_unparseable() -> None:
    findings = _findings(
        """
components:
  schemas:
    Pet:
      properties:
        age:
          deprecated: {to: true}
          extensions:
            x-stability-level: stable
            x-sunset: 2026-02-30
"""
    )

    assert [finding.kind for finding in findings] == [FindingKind.SUNSET_UNPARSEABLE]
    assert "2026-02-30" in findings[0].parse_error


def test_deprecation_without_stability_level_is_not_reported() -> None:
    findings = _findings(
        """
components:
  schemas:
    Pet:
      properties:
        age:
          deprecated: {to: true}
          extensions:
            x-sunset: "2026-12-31"
"""
    )

    assert findings == []


def test_zero_grace_period_without_sunset_is_not_reported() -> None:
    findings = _findings(
        """
components:
  schemas:
    Pet:
      properties:
        age:
          deprecated: {to: true}
          extensions:
            x-stability-level: draft
"""
    )

    assert findings == []


def test_customer_address_street_reached_directly_and_through_allof() -> None:
    findings = _findings(
        """
components:
  schemas:
    Customer:
      properties:
        address: &address
          properties:
            street: &street
              deprecated: {to: true}
              extensions:
                x-stability-level: stable
                x-sunset: "2026-12-31"
      allOf:
        - properties:
            address: *address
        - properties:
            address:
              properties:
                street: *street
"""
    )

    assert len(findings) == 1
    assert findings[0].scope == AnalysisScope.component_schema("Customer")
    assert findings[0].property_path == "address.street"


def test_request_body_json_and_xml_collapse_to_one_finding() -> None:
    findings = _findings(
        """
paths:
  /customers:
    operations:
      post:
        requestBody:
          content:
            application/json:
              schema:
                properties:
                  email: &email
                    deprecated: {to: true}
                    extensions:
                      x-stability-level: stable
                      x-sunset: "2026-12-31"
            application/xml:
              schema:
                properties:
                  email: *email
"""
    )

    assert len(findings) == 1
    assert findings[0].scope == AnalysisScope.request_body("POST", "/customers")


def test_shared_inlined_request_schema_is_reported_per_operation() -> None:
    findings = _findings(
        """
x-shared:
  customer: &customer
    properties:
      email:
        deprecated: {from: false, to: true}
        extensions:
          x-stability-level: beta
          x-sunset: "2026-12-31"
paths:
  /customers:
    operations:
      post:
        requestBody:
          content:
            application/json:
              schema: *customer
  /customers/{id}:
    operations:
      put:
        requestBody:
          content:
            application/json:
              schema: *customer
"""
    )

    assert len(findings) == 2
    assert {finding.scope.method for finding in findings} == {"POST", "PUT"}
    assert {finding.property_path for finding in findings} == {"email"}


def test_recursive_schema_terminates_and_reports_once() -> None:
    findings = _findings(
        """
components:
  schemas:
    Category: &category
      properties:
        label:
          deprecated: {to: true}
          extensions:
            x-stability-level: stable
            x-sunset: "2026-12-31"
        parent: *category
      oneOf:
        - *category
"""
    )

    assert [finding.property_path for finding in findings] == ["label"]


def test_analysis_is_idempotent() -> None:
    document = """
components:
  schemas:
    Pet:
      properties:
        age:
          deprecated: {to: true}
          extensions: {x-stability-level: stable, x-sunset: "2026-12-31"}
        name:
          deprecated: {from: true, to: false}
"""
    report = parse_diff_document(document)

    assert set(aggregate_findings(report, _POLICY)) == set(aggregate_findings(report, _POLICY))
    assert len(aggregate_findings(report, _POLICY)) == 2
