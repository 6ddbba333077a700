from lm63.models.header import Format, IESHeader, TiltSpecification
from lm63.parser.ies_parser import parse_ies_text
from lm63.validation import default_validator, minimal_validator
from lm63.validation.rules.keywords import RuleMissingRequiredKeywords


def test_complete_2002_header_has_no_warnings():
    text = """IESNA:LM-63-2002
[TEST] 1234
[TESTLAB] Acme Labs
[ISSUEDATE] 2003-01-01
[MANUFAC] Acme
[LUMCAT] XZ-400
[LUMINAIRE] Downlight
TILT=NONE
"""
    report = default_validator().run(parse_ies_text(text))
    assert report.summary == {"errors": 0, "warnings": 0, "info": 0}


def test_missing_required_is_warning_with_tilt_line_ref():
    doc = parse_ies_text("IESNA:LM-63-2002\n[TEST] 1\nTILT=NONE\n")
    findings = RuleMissingRequiredKeywords().evaluate(doc)
    assert len(findings) == 1
    f = findings[0]
    assert f.severity == "WARN"
    assert f.evidence["missing_keywords"] == ["TESTLAB", "ISSUEDATE", "MANUFAC"]
    assert f.line_refs == [3]


def test_findings_sorted_by_severity_then_id():
    doc = parse_ies_text("IESNA91\n[TEST] 1\n[LAMP] a\nTILT=INCLUDE\n", None)
    report = default_validator().run(doc)
    severities = [f.severity for f in report.findings]
    assert severities == sorted(severities, key={"ERROR": 0, "WARN": 1, "INFO": 2}.get)
    ids = {f.id for f in report.findings}
    assert {"LM63_KW_REQUIRED", "LM63_STD_VERSION", "LM63_TILT_INCLUDE"} <= ids


def test_legacy_file_reported():
    doc = parse_ies_text("Some old file\nTILT=NONE\n")
    report = default_validator().run(doc)
    assert any(f.id == "LM63_STD_VERSION" for f in report.findings)


def test_multiline_values_reported_with_declaration_line():
    doc = parse_ies_text("IESNA:LM-63-1995\n[TEST] 1\n[MORE] 2\nTILT=NONE\n")
    report = default_validator().run(doc)
    more = [f for f in report.findings if f.id == "LM63_KW_MORE"]
    assert more and more[0].line_refs == [2]


def test_minimal_validator_only_checks_required():
    header = IESHeader(format=Format.LM63_1995, tilt_specification=TiltSpecification.NONE)
    assert minimal_validator().run(header).findings == []
