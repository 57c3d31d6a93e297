"""Pytest configuration and fixtures for schema tests."""
import pytest


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def minimal_module():
    """Minimal valid module metadata"""
    return {"header": "# Network"}


@pytest.fixture
def full_module():
    """Module metadata with every section populated"""
    return {
        "header": "# Network\n\nCreates a VPC.",
        "footer": "## License\n\nMIT",
        "inputs": [
            {"name": "cidr_block", "type": "string", "description": "VPC CIDR", "required": True},
            {"name": "tags", "type": "map(string)", "default": {}, "required": False},
        ],
        "outputs": [
            {"name": "vpc_id", "description": "ID of the VPC"},
        ],
        "providers": [
            {"name": "aws", "version": ">= 5.0"},
            {"name": "aws", "alias": "replica"},
        ],
        "requirements": [
            {"name": "terraform", "version": ">= 1.3"},
        ],
        "resources": [
            {
                "type": "vpc",
                "provider_name": "aws",
                "provider_source": "hashicorp/aws",
                "mode": "managed",
                "version": "5.31.0",
            },
            {
                "type": "availability_zones",
                "provider_name": "aws",
                "provider_source": "hashicorp/aws",
                "mode": "data",
            },
        ],
        "module_calls": [
            {"name": "subnets", "source": "./modules/subnets"},
        ],
    }
