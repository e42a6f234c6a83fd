"""
Pytest configuration and shared fixtures for code flow tests.
"""
import json
import pytest

from sarif_flows.core.errors import ResolutionError
from sarif_flows.core.models import ResolvedLocation


class FakeResolver:
    """
    Location resolver double.

    URIs listed in mapped_uris resolve as mapped, URIs in failing_uris raise
    ResolutionError, anything else resolves to a not-mapped placeholder.
    Every call is recorded in order.
    """

    def __init__(self, mapped_uris=None, failing_uris=None):
        self.mapped_uris = set(mapped_uris or [])
        self.failing_uris = set(failing_uris or [])
        self.calls = []

    async def resolve(self, physical_location):
        if physical_location is None:
            return None
        uri = physical_location.get('artifactLocation', {}).get('uri')
        self.calls.append(uri)
        if uri in self.failing_uris:
            raise ResolutionError(f"cannot resolve {uri}")
        mapped = uri in self.mapped_uris
        return ResolvedLocation(
            uri=uri,
            mapped=mapped,
            file_path=f"/src/{uri}" if mapped else None,
            start_line=physical_location.get('region', {}).get('startLine'),
            physical_location=physical_location,
        )


def make_trace_location(uri='app.py', line=1, nesting_level=None, message=None,
                        step=None, importance=None, state=None):
    """Build a SARIF threadFlowLocation dictionary."""
    location = {
        'physicalLocation': {
            'artifactLocation': {'uri': uri},
            'region': {'startLine': line},
        }
    }
    if message is not None:
        location['message'] = {'text': message}

    trace_location = {'location': location}
    if nesting_level is not None:
        trace_location['nestingLevel'] = nesting_level
    if step is not None:
        trace_location['step'] = step
    if importance is not None:
        trace_location['importance'] = importance
    if state is not None:
        trace_location['state'] = state
    return trace_location


def make_code_flow(*threads, message=None):
    """Build a SARIF codeFlow from lists of threadFlowLocations."""
    code_flow = {
        'threadFlows': [
            {'id': f"thread-{index}", 'locations': list(locations)}
            for index, locations in enumerate(threads)
        ]
    }
    if message is not None:
        code_flow['message'] = {'text': message}
    return code_flow


@pytest.fixture
def fake_resolver():
    """Resolver that maps nothing until told otherwise."""
    return FakeResolver()


@pytest.fixture
def call_return_thread():
    """Thread flow with nesting levels [0, 1, 1, 0]."""
    return [
        make_trace_location('main.c', 10, nesting_level=0, message='call helper', step=1),
        make_trace_location('helper.c', 3, nesting_level=1, message='read input', step=2),
        make_trace_location('helper.c', 7, nesting_level=1, step=3),
        make_trace_location('main.c', 11, nesting_level=0, message='use result', step=4),
    ]


@pytest.fixture
def sample_code_flows(call_return_thread):
    """Two code flows, the first with two threads."""
    return [
        make_code_flow(
            call_return_thread,
            [make_trace_location('worker.c', 20, message='worker start')],
            message='taint flow'
        ),
        make_code_flow(
            [
                make_trace_location('lib.c', 1, nesting_level=0),
                make_trace_location('lib.c', 2, nesting_level=0),
            ]
        ),
    ]


@pytest.fixture
def sample_sarif_log():
    """Minimal SARIF log with one result carrying a code flow and one without."""
    return {
        "version": "2.1.0",
        "runs": [
            {
                "tool": {"driver": {"name": "flowcheck"}},
                "originalUriBaseIds": {"SRCROOT": {"uri": "file:///does/not/exist/"}},
                "results": [
                    {
                        "ruleId": "TAINT001",
                        "message": {"text": "Tainted data reaches {0}", "arguments": ["exec"]},
                        "codeFlows": [
                            {
                                "message": {"text": "input to exec"},
                                "threadFlows": [
                                    {
                                        "id": "main",
                                        "locations": [
                                            {
                                                "nestingLevel": 0,
                                                "step": 1,
                                                "location": {
                                                    "physicalLocation": {
                                                        "artifactLocation": {"uri": "src/app.py"},
                                                        "region": {"startLine": 2}
                                                    },
                                                    "message": {"text": "read request"}
                                                }
                                            },
                                            {
                                                "nestingLevel": 1,
                                                "step": 2,
                                                "location": {
                                                    "physicalLocation": {
                                                        "artifactLocation": {"uri": "src/util.py"},
                                                        "region": {"startLine": 5}
                                                    }
                                                }
                                            },
                                            {
                                                "nestingLevel": 0,
                                                "step": 3,
                                                "importance": "essential",
                                                "location": {
                                                    "physicalLocation": {
                                                        "artifactLocation": {"uri": "src/app.py"},
                                                        "region": {"startLine": 3}
                                                    },
                                                    "message": {"text": "call exec"}
                                                }
                                            }
                                        ]
                                    }
                                ]
                            }
                        ]
                    },
                    {
                        "ruleId": "STYLE002",
                        "message": {"text": "No flow here"}
                    }
                ]
            }
        ]
    }


@pytest.fixture
def source_tree(tmp_path):
    """Checkout directory containing the files referenced by sample_sarif_log."""
    root = tmp_path / "checkout"
    (root / "src").mkdir(parents=True)
    (root / "src" / "app.py").write_text("import os\nrequest = input()\nos.system(request)\n")
    (root / "src" / "util.py").write_text("\n\n\n\ndef passthrough(x):\n    return x\n")
    return root


@pytest.fixture
def temp_sarif_file(tmp_path):
    """Create a temporary SARIF file and return a helper function."""
    def _create_file(data, name="results.sarif"):
        file_path = tmp_path / name
        with open(file_path, "w") as f:
            json.dump(data, f)
        return str(file_path)

    return _create_file
