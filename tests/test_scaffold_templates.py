"""Tests for boilerplate template functions."""

import pytest

from insta_component.scaffold.templates import (
    component_template,
    snapshot_test_template,
    story_template,
    styles_template,
)


class TestComponentTemplate:
    """Root element selection follows styled > native > plain web."""

    @pytest.mark.parametrize("native", [True, False])
    def test_styled_renders_container(self, native):
        text = component_template("Widget", native=native, styled_components=True)
        assert "import StyledComponents from './WidgetStyled';" in text
        assert "<Container />" in text
        assert "react-native" not in text
        assert "<div />" not in text

    def test_native_renders_view(self):
        text = component_template("Widget", native=True)
        assert "import { View } from 'react-native';" in text
        assert "<View />" in text
        assert "Container" not in text

    def test_plain_web_renders_div(self):
        text = component_template("Widget")
        assert "<div />" in text
        assert "react-native" not in text
        assert "Container" not in text

    def test_typescript_annotates_component(self):
        assert "const Widget: React.FC = () => {" in component_template("Widget", typescript=True)
        assert "const Widget = () => {" in component_template("Widget", typescript=False)

    def test_exports_component(self):
        assert "export default Widget;" in component_template("Widget")


class TestStylesTemplate:
    """Styles file flavors."""

    def test_web_uses_div(self):
        text = styles_template(native=False)
        assert "import styled from 'styled-components';" in text
        assert "styled.div``" in text

    def test_native_uses_view(self):
        text = styles_template(native=True)
        assert "import styled from 'styled-components/native';" in text
        assert "styled.View``" in text

    def test_exports_container_collection(self):
        text = styles_template()
        assert "const StyledComponents = {\n    Container,\n};" in text
        assert "export default StyledComponents;" in text


class TestStoryTemplate:
    """Storybook file variants."""

    def test_native_registers_with_stories_of(self):
        text = story_template("Widget", native=True, typescript=True)
        assert "import { storiesOf } from '@storybook/react-native';" in text
        assert "storiesOf('Widget', module)" in text
        assert ".add('default'" in text
        assert "Primary" not in text

    def test_web_typescript_variant(self):
        text = story_template("Widget", native=False, typescript=True)
        assert "@storybook/react-native" not in text
        assert "title: 'Widget'," in text
        assert (
            "const Template : Story<ComponentProps <typeof Widget>> = (args) => <Widget {...args} />;"
            in text
        )
        assert "export const Primary = Template.bind({});" in text
        assert "Primary.args = {};" in text

    def test_web_javascript_variant_has_no_types(self):
        text = story_template("Widget", native=False, typescript=False)
        assert "const Template = (args) => <Widget {...args} />;" in text
        assert "Meta" not in text
        assert "Story<" not in text


class TestSnapshotTestTemplate:
    """Snapshot test file content."""

    def test_imports_component_from_parent(self):
        text = snapshot_test_template("Widget")
        assert "import Widget from '../Widget';" in text
        assert "renderer.create(<Widget />).toJSON()" in text
        assert "expect(tree).toMatchSnapshot();" in text
        assert text.count("it(") == 1
