"""Pytest configuration and fixtures for CLI tests."""
import pytest
from typer.testing import CliRunner


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def module_file(tmp_path):
    """Module metadata file."""
    path = tmp_path / "module.yaml"
    path.write_text(
        """
header: "# Network"
inputs:
  - name: cidr_block
    type: string
    description: VPC CIDR
    required: true
outputs:
  - name: vpc_id
    description: ID of the VPC
""".strip()
    )
    return path


@pytest.fixture
def templates_dir(tmp_path):
    """Markdown templates with header and inputs sections."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "all.tmpl").write_text('{%- include "header" %}\n\n{% include "inputs" %}\n')
    (directory / "header.tmpl").write_text("{{ module.header }}")
    (directory / "inputs.tmpl").write_text(
        "{{ indent(0, '#') }} Inputs\n"
        "{% for input in module.inputs %}\n"
        "- {{ name(input.name) }}: {{ input.description }}"
        "{% endfor %}"
    )
    return directory


@pytest.fixture
def config_file(tmp_path):
    """Configuration disabling underscore escaping."""
    path = tmp_path / "modoc.yml"
    path.write_text("settings:\n  escapeCharacters: false\n  indentLevel: 3\n")
    return path
