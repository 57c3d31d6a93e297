"""Pytest configuration and fixtures for SDK tests."""
import pytest

from modoc_schema import Module, Settings
from modoc_sdk import Fragment


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture
def settings():
    """Default rendering settings."""
    return Settings()


@pytest.fixture
def sample_module():
    """Module with a header and one of every section."""
    return Module.model_validate(
        {
            "header": "sample header",
            "inputs": [
                {"name": "cidr_block", "type": "string", "description": "VPC CIDR", "required": True},
                {"name": "enable_dns", "type": "bool", "default": True},
            ],
            "outputs": [
                {"name": "vpc_id", "description": "ID of the VPC"},
            ],
            "resources": [
                {"type": "vpc", "provider_name": "aws", "provider_source": "hashicorp/aws"},
            ],
        }
    )


@pytest.fixture
def section_fragments():
    """Entry fragment including a section that applies a custom function."""
    return [
        Fragment(name="all", text='{%- include "section" -%}'),
        Fragment(
            name="section",
            text="""
    {%- with header = module.header -%}
        {{ custom(header) }}
    {%- endwith -%}
    """,
        ),
    ]


@pytest.fixture
def custom_funcs():
    """Custom function wrapping its argument."""
    return {"custom": lambda s: f"customized <<{s}>>"}


@pytest.fixture
def template_dir(tmp_path):
    """Directory of fragment files rendering a small Markdown document."""
    directory = tmp_path / "templates"
    directory.mkdir()
    (directory / "all.tmpl").write_text(
        '{%- include "header" %}\n\n{% include "inputs" -%}\n'
    )
    (directory / "header.tmpl").write_text("{{ module.header }}")
    (directory / "inputs.j2").write_text(
        "{{ indent(0, '#') }} Inputs\n"
        "{% for input in module.inputs %}\n"
        "- {{ name(input.name) }}"
        "{% endfor %}"
    )
    (directory / "README.md").write_text("not a template")
    return directory
