"""Example: Rendering contact cards with sections, partials and lambdas.

This example shows:
1. Rendering pydantic models through VariantContext
2. Reusing a partial for every list item
3. A callable used as a section lambda
4. Inspecting render errors
"""

from pydantic import BaseModel

from tache import PartialMap
from tache import Renderer
from tache import VariantContext
from tache import collect_keys


class Contact(BaseModel):
    """A single contact."""

    name: str
    email: str
    tags: list[str] = []


class AddressBook(BaseModel):
    """Address book input."""

    owner: str
    contacts: list[Contact]


PARTIALS = PartialMap(
    {
        "card": "* {{name}} <{{email}}>{{#tags}} #{{.}}{{/tags}}\n",
    }
)

TEMPLATE = """{{#bold}}{{owner}}{{/bold}}'s contacts
{{#contacts}}{{>card}}{{/contacts}}{{^contacts}}(none)
{{/contacts}}"""


def bold(text: str, renderer: Renderer, context: VariantContext) -> str:
    """Wrap the rendered section body in asterisks."""
    return f"**{renderer.render(text, context)}**"


def demo_render():
    """Render the address book."""
    print("\n" + "=" * 60)
    print("DEMO 1: Sections, partials and lambdas")
    print("=" * 60)

    book = AddressBook(
        owner="Ada",
        contacts=[
            Contact(name="Grace", email="grace@example.com", tags=["navy"]),
            Contact(name="Linus", email="linus@example.com"),
        ],
    )
    context = VariantContext({"bold": bold, **dict(book)}, PARTIALS)
    print(Renderer().render(TEMPLATE, context))
    print(f"Keys used: {sorted(collect_keys(TEMPLATE))}")


def demo_errors():
    """Show how render errors are reported."""
    print("\n" + "=" * 60)
    print("DEMO 2: Error reporting")
    print("=" * 60)

    renderer = Renderer()
    output = renderer.render("Hello {{#who}}{{name}}{{/whom}}!", VariantContext())
    print(f"Output: {output!r}")
    print(f"Error: {renderer.error()} at {renderer.error_pos()}")


if __name__ == "__main__":
    demo_render()
    demo_errors()
