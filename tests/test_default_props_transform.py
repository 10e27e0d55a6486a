"""
Tests for DefaultPropsToParametersTransform.
"""

from conftest import CONTAINER_EXPECTED, CONTAINER_SOURCE


def test_container_example_matches_documented_output(run_transform):
    result = run_transform(CONTAINER_SOURCE)

    assert result.source == CONTAINER_EXPECTED
    assert result.changed
    assert result.rewritten == ["Container"]
    assert result.skipped == []


def test_second_run_is_a_no_op(run_transform):
    first = run_transform(CONTAINER_SOURCE)
    second = run_transform(first.source)

    assert second.source == first.source
    assert not second.changed
    assert second.rewritten == []


def test_file_without_default_props_is_returned_unchanged(run_transform):
    source = """\
import styled from "styled-components";
import { Box } from "rebass";

export const Panel = styled(Box)`
  padding: 4px;
`;
"""
    result = run_transform(source)

    assert result.source == source
    assert not result.changed


def test_array_defaults_are_copied_verbatim(run_transform):
    source = """\
import styled from 'styled-components';
import { Flex } from 'rebass';

const Row = styled(Flex)`
  gap: 8px;
`;

Row.defaultProps = {
  items: [1, 2, 3],
  label: "Items",
  wrap: true,
  empty: null,
};
"""
    expected = """\
import styled from 'styled-components';
import { Flex } from 'rebass';

function UnstyledRow({ items = [1, 2, 3], label = 'Items', wrap = true, empty = null, ...props }) {
  return <Flex {...props} items={items} label={label} wrap={wrap} empty={empty} />;
}

const Row = styled(UnstyledRow)`
  gap: 8px;
`;
"""
    assert run_transform(source).source == expected


def test_each_component_gets_its_own_wrapper(run_transform):
    source = """\
import styled from 'styled-components';
import { Box, Text } from 'rebass';

const Card = styled(Box)`
  border: 1px solid;
`;

const Title = styled(Text)`
  font-weight: bold;
`;

Card.defaultProps = {
  p: 2,
};

Title.defaultProps = {
  level: 2,
};
"""
    expected = """\
import styled from 'styled-components';
import { Box, Text } from 'rebass';

function UnstyledCard({ p = 2, ...props }) {
  return <Box {...props} p={p} />;
}

function UnstyledTitle({ level = 2, ...props }) {
  return <Text {...props} level={level} />;
}

const Card = styled(UnstyledCard)`
  border: 1px solid;
`;

const Title = styled(UnstyledTitle)`
  font-weight: bold;
`;
"""
    result = run_transform(source)

    assert result.source == expected
    assert result.rewritten == ["Card", "Title"]


def test_empty_default_props_keeps_only_rest_binding(run_transform):
    source = """\
import styled from 'styled-components';
import { Box } from 'rebass';

const Badge = styled(Box)``;

Badge.defaultProps = {};
"""
    expected = """\
import styled from 'styled-components';
import { Box } from 'rebass';

function UnstyledBadge({ ...props }) {
  return <Box {...props} />;
}

const Badge = styled(UnstyledBadge)``;
"""
    assert run_transform(source).source == expected


def test_no_styled_declaration_leaves_file_untouched(run_transform):
    source = """\
import { Box } from 'rebass';

const Plain = (props) => <Box {...props} />;

Plain.defaultProps = {
  p: 1,
};
"""
    result = run_transform(source)

    assert result.source == source
    assert result.rewritten == []
    assert len(result.skipped) == 1
    assert result.skipped[0].name == "Plain"
    assert "no styled" in result.skipped[0].reason


def test_file_without_imports_inserts_at_top(run_transform):
    source = """\
const Wrapper = styled(Base)`
  color: red;
`;

Wrapper.defaultProps = {
  color: 'red',
};
"""
    expected = """\
function UnstyledWrapper({ color = 'red', ...props }) {
  return <Base {...props} color={color} />;
}

const Wrapper = styled(UnstyledWrapper)`
  color: red;
`;
"""
    assert run_transform(source).source == expected


def test_directive_prologue_stays_first(run_transform):
    source = """\
'use client';

const Wrapper = styled(Base)``;

Wrapper.defaultProps = {
  color: 'red',
};
"""
    expected = """\
'use client';

function UnstyledWrapper({ color = 'red', ...props }) {
  return <Base {...props} color={color} />;
}

const Wrapper = styled(UnstyledWrapper)``;
"""
    assert run_transform(source).source == expected


def test_directive_before_imports(run_transform):
    source = """\
"use client";
import styled from 'styled-components';

const Wrapper = styled(Base)``;

Wrapper.defaultProps = { color: 'red' };
"""
    output = run_transform(source).source

    assert output.startswith("\"use client\";\nimport styled from 'styled-components';\n\nfunction UnstyledWrapper(")


def test_double_quote_style(run_transform):
    source = """\
import styled from 'styled-components';

const Label = styled(Text)``;

Label.defaultProps = {
  tone: 'it\\'s',
};
"""
    result = run_transform(source, quote="double")

    assert 'function UnstyledLabel({ tone = "it\'s", ...props }) {' in result.source


def test_single_quote_style_escapes_quotes(run_transform):
    source = """\
import styled from 'styled-components';

const Label = styled(Text)``;

Label.defaultProps = {
  tone: "it's",
};
"""
    result = run_transform(source)

    assert "function UnstyledLabel({ tone = 'it\\'s', ...props }) {" in result.source


def test_non_literal_defaults_are_copied_verbatim(run_transform):
    source = """\
import styled from 'styled-components';

const Button = styled(Base)``;

Button.defaultProps = {
  offset: -1,
  onClick: () => {},
};
"""
    result = run_transform(source)

    assert "function UnstyledButton({ offset = -1, onClick = () => {}, ...props }) {" in result.source
    assert "return <Base {...props} offset={offset} onClick={onClick} />;" in result.source


def test_duplicate_keys_keep_last_value_in_first_position(run_transform):
    source = """\
import styled from 'styled-components';

const Chip = styled(Box)``;

Chip.defaultProps = {
  size: 1,
  tone: 'info',
  size: 2,
};
"""
    result = run_transform(source)

    assert "function UnstyledChip({ size = 2, tone = 'info', ...props }) {" in result.source


def test_unsupported_entries_skip_the_component(run_transform):
    cases = {
        "[key]: 1": "computed",
        "...base": "spread",
        "tone": "shorthand",
        "render() { return null; }": "method",
        "props: {}": "rest binding",
        "'aria-label': 'x'": "not a valid parameter name",
    }
    for entry, reason in cases.items():
        source = f"""\
import styled from 'styled-components';

const Chip = styled(Box)``;

Chip.defaultProps = {{
  {entry},
}};
"""
        result = run_transform(source)

        assert result.source == source, entry
        assert reason in result.skipped[0].reason, entry


def test_non_object_default_props_is_skipped(run_transform):
    source = """\
import styled from 'styled-components';
import defaults from './defaults';

const Chip = styled(Box)``;

Chip.defaultProps = defaults;
"""
    result = run_transform(source)

    assert result.source == source
    assert "object literal" in result.skipped[0].reason


def test_skipped_component_does_not_block_others(run_transform):
    source = """\
import styled from 'styled-components';

const Good = styled(Box)``;

const Bad = styled(Box)``;

Good.defaultProps = {
  p: 1,
};

Bad.defaultProps = {
  ...shared,
};
"""
    result = run_transform(source)

    assert result.rewritten == ["Good"]
    assert [s.name for s in result.skipped] == ["Bad"]
    assert "const Good = styled(UnstyledGood)``;" in result.source
    assert "const Bad = styled(Box)``;" in result.source
    assert "Bad.defaultProps = {\n  ...shared,\n};" in result.source
    assert "Good.defaultProps" not in result.source


def test_repeated_assignment_for_same_component_is_rewritten_once(run_transform):
    source = """\
import styled from 'styled-components';

const Box2 = styled(Box)``;

Box2.defaultProps = {
  p: 1,
};

Box2.defaultProps = {
  p: 2,
};
"""
    result = run_transform(source)

    assert result.rewritten == ["Box2"]
    assert result.source.count("function UnstyledBox2") == 1
    assert "Box2.defaultProps = {\n  p: 2,\n};" in result.source


def test_nested_assignment_is_not_rewritten(run_transform):
    source = """\
import styled from 'styled-components';

const Tag = styled(Box)``;

export const defaults = (Tag.defaultProps = { p: 1 });
"""
    result = run_transform(source)

    assert result.source == source
    assert "standalone statement" in result.skipped[0].reason


def test_member_target_is_not_rewritten(run_transform):
    source = """\
import styled from 'styled-components';

const Tag = styled(Box)``;

ui.Tag.defaultProps = { p: 1 };
"""
    result = run_transform(source)

    assert result.source == source
    assert result.skipped[0].name == "ui.Tag"


def test_type_annotations_are_preserved(run_transform):
    source = """\
import styled from 'styled-components';
import { Box } from 'rebass';

interface CardProps {
  elevated?: boolean;
}

const gap: number = 4;

const Card = styled(Box)`
  border-radius: 4px;
`;

Card.defaultProps = {
  elevated: false,
};
"""
    expected = """\
import styled from 'styled-components';
import { Box } from 'rebass';

function UnstyledCard({ elevated = false, ...props }) {
  return <Box {...props} elevated={elevated} />;
}

interface CardProps {
  elevated?: boolean;
}

const gap: number = 4;

const Card = styled(UnstyledCard)`
  border-radius: 4px;
`;
"""
    assert run_transform(source).source == expected


def test_non_ascii_text_keeps_offsets_aligned(run_transform):
    source = CONTAINER_SOURCE.replace(
        "const Container", "// Überschrift ✓ für den Container\nconst Container"
    )
    expected = CONTAINER_EXPECTED.replace(
        "const Container", "// Überschrift ✓ für den Container\nconst Container"
    )
    assert run_transform(source).source == expected


def test_crlf_line_endings_are_kept(run_transform):
    source = CONTAINER_SOURCE.replace("\n", "\r\n")
    expected = CONTAINER_EXPECTED.replace("\n", "\r\n")

    assert run_transform(source).source == expected


def test_custom_indent(run_transform):
    result = run_transform(CONTAINER_SOURCE, indent="    ")

    assert "\n    return <Box {...props} px={px} />;\n" in result.source
