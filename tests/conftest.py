"""
Pytest configuration and shared fixtures.

Adds src to the path so the package imports without being installed.
"""

import sys
from pathlib import Path

import pytest

src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from default_props_codemod.parser import TreeSitterParser  # noqa: E402
from default_props_codemod.transformer import DefaultPropsToParametersTransform  # noqa: E402

CONTAINER_SOURCE = """\
import React from 'react';
import styled from 'styled-components';
import { Box } from 'rebass';

const Container = styled(Box)`
  max-width: 1024px;
  margin: 0 auto;
`;

Container.defaultProps = {
  px: 3,
};

export default Container;
"""

CONTAINER_EXPECTED = """\
import React from 'react';
import styled from 'styled-components';
import { Box } from 'rebass';

function UnstyledContainer({ px = 3, ...props }) {
  return <Box {...props} px={px} />;
}

const Container = styled(UnstyledContainer)`
  max-width: 1024px;
  margin: 0 auto;
`;

export default Container;
"""


@pytest.fixture
def container_source() -> str:
    return CONTAINER_SOURCE


@pytest.fixture
def container_expected() -> str:
    return CONTAINER_EXPECTED


@pytest.fixture
def tsx_parser() -> TreeSitterParser:
    return TreeSitterParser("tsx")


@pytest.fixture
def run_transform(tsx_parser):
    """Parse with the tsx grammar and transform, returning the TransformResult."""

    def _run(source: str, **kwargs):
        return DefaultPropsToParametersTransform(**kwargs).transform(tsx_parser.parse(source))

    return _run
