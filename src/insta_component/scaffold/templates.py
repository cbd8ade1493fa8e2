"""Boilerplate templates for generated component files.

Each template is a pure function of the component name and the relevant
toggles, returning the file's full text.
"""

from __future__ import annotations

NATIVE_VIEW = "View"
WEB_ELEMENT = "div"
STYLED_ROOT = "Container"


def component_template(
    name: str,
    native: bool = False,
    typescript: bool = False,
    styled_components: bool = False,
) -> str:
    """Render the component source file.

    Root element priority is styled > native > plain web, regardless of
    the other toggles.
    """
    signature = f"const {name}: React.FC = () => {{" if typescript else f"const {name} = () => {{"

    if styled_components:
        imports = (
            "import React from 'react';\n"
            f"import StyledComponents from './{name}Styled';\n"
            "\n"
            "const {\n"
            f"    {STYLED_ROOT},\n"
            "} = StyledComponents;\n"
        )
        root = STYLED_ROOT
    elif native:
        imports = (
            "import React from 'react';\n"
            f"import {{ {NATIVE_VIEW} }} from 'react-native';\n"
        )
        root = NATIVE_VIEW
    else:
        imports = "import React from 'react';\n"
        root = WEB_ELEMENT

    return (
        f"{imports}"
        "\n"
        f"{signature}\n"
        "    return (\n"
        f"        <{root} />\n"
        "    );\n"
        "};\n"
        "\n"
        f"export default {name};\n"
    )


def styles_template(native: bool = False) -> str:
    """Render the styled-components file defining ``Container``."""
    module = "styled-components/native" if native else "styled-components"
    element = NATIVE_VIEW if native else WEB_ELEMENT
    return (
        f"import styled from '{module}';\n"
        "\n"
        f"const {STYLED_ROOT} = styled.{element}``;\n"
        "\n"
        "const StyledComponents = {\n"
        f"    {STYLED_ROOT},\n"
        "};\n"
        "\n"
        "export default StyledComponents;\n"
    )


def _native_story(name: str) -> str:
    return (
        "import React from 'react';\n"
        "import { storiesOf } from '@storybook/react-native';\n"
        f"import {name} from './{name}';\n"
        "\n"
        f"storiesOf('{name}', module)\n"
        "    .add('default', () => (\n"
        f"        <{name} />\n"
        "    ));\n"
    )


def _web_story(name: str, typescript: bool) -> str:
    if typescript:
        imports = (
            "import React, { ComponentProps } from 'react';\n"
            "import { Story, Meta } from '@storybook/react';\n"
        )
        meta_suffix = " as Meta;"
        template = (
            f"const Template : Story<ComponentProps <typeof {name}>> = "
            f"(args) => <{name} {{...args}} />;"
        )
    else:
        imports = "import React from 'react';\n"
        meta_suffix = ";"
        template = f"const Template = (args) => <{name} {{...args}} />;"

    return (
        f"{imports}"
        f"import {name} from './{name}';\n"
        "\n"
        "export default {\n"
        f"    title: '{name}',\n"
        f"    component: {name},\n"
        f"}}{meta_suffix}\n"
        "\n"
        f"{template}\n"
        "\n"
        "export const Primary = Template.bind({});\n"
        "Primary.args = {};\n"
    )


def story_template(name: str, native: bool = False, typescript: bool = False) -> str:
    """Render the Storybook file.

    Native components register through ``storiesOf``; web components use
    the default-export metadata format with a ``Primary`` story.
    """
    if native:
        return _native_story(name)
    return _web_story(name, typescript)


def snapshot_test_template(name: str) -> str:
    """Render a single snapshot test for the component."""
    return (
        "import React from 'react';\n"
        "import renderer from 'react-test-renderer';\n"
        f"import {name} from '../{name}';\n"
        "\n"
        f"describe('<{name} />', () => {{\n"
        "    it('renders correctly', () => {\n"
        f"        const tree = renderer.create(<{name} />).toJSON();\n"
        "        expect(tree).toMatchSnapshot();\n"
        "    });\n"
        "});\n"
    )
