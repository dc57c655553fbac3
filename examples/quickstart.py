"""Quickstart example for localizemessages.

Demonstrates the inline-message approach: code keeps its messages in the
default culture and names each one with a localize key. Other cultures are
served from resources, with the inline message as the fallback.

Note: Missing resources are logged as warnings. Logging is configured below
so the warnings show up in the terminal.
"""

import logging
import tempfile
from pathlib import Path

from babel.messages.catalog import Catalog
from babel.messages.pofile import write_po

from localizemessages import (
    CatalogStringLocalizerFactory,
    DefaultLocalizer,
    DefaultLocalizerFactory,
    DefaultLocalizerOptions,
    DictStringLocalizer,
    PathCatalogLoader,
    SimpleLocalizer,
    class_method_localize_key,
    fmt,
    just_this_localize_key,
)
from localizemessages.locale_utils import get_system_locale

logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")


class OrderService:
    """Stands in for an application class that creates messages."""


# Example 1: Inline message for the default culture
print("=" * 50)
print("Example 1: Default Culture")
print("=" * 50)

options = DefaultLocalizerOptions("en")
resources = DictStringLocalizer(
    {
        "Greeting": "Bonjour",
        "OrderPlaced": "Commande {0} passée pour {1}.",
    },
    raise_on_missing=False,
)
localizer = DefaultLocalizer(options, resources, resource_type="Orders")

key = just_this_localize_key("Greeting", OrderService)
print(localizer.localize_string_message(key, "Hello", culture="en-GB"))
# Output: Hello

# Example 2: Resource lookup for another culture
print("\n" + "=" * 50)
print("Example 2: Other Culture")
print("=" * 50)

print(localizer.localize_string_message(key, "Hello", culture="fr-FR"))
# Output: Bonjour

# Example 3: Formatted messages share their arguments with the resource string
print("\n" + "=" * 50)
print("Example 3: Formatted Message")
print("=" * 50)

key = just_this_localize_key("OrderPlaced", OrderService)
order = fmt("Order {0} placed for {1}.", 42, "Ann")
print(localizer.localize_formatted_message(key, order, culture="fr"))
# Output: Commande 42 passée pour Ann.

# Example 4: Missing resource falls back to the inline message and logs a warning
print("\n" + "=" * 50)
print("Example 4: Missing Resource")
print("=" * 50)

key = class_method_localize_key("NoStock", OrderService, "place", source_line_number=80)
print(localizer.localize_string_message(key, "Out of stock.", culture="de-DE"))
# Output: Out of stock.  (plus a WARNING naming the key, culture and caller)

# Example 5: Babel gettext catalogs on disk
print("\n" + "=" * 50)
print("Example 5: Gettext Catalogs")
print("=" * 50)

with tempfile.TemporaryDirectory() as tmpdir:
    catalog = Catalog(locale="fr")
    catalog.add("SimpleLocalizer(Save)", "Enregistrer")
    po_dir = Path(tmpdir) / "fr" / "LC_MESSAGES"
    po_dir.mkdir(parents=True)
    with (po_dir / "Buttons.po").open("wb") as fileobj:
        write_po(fileobj, catalog)

    factory = DefaultLocalizerFactory(
        options,
        CatalogStringLocalizerFactory(PathCatalogLoader(f"{tmpdir}/{{locale}}/LC_MESSAGES")),
    )
    simple = SimpleLocalizer(factory.create("Buttons"))
    print(simple.localize_string("Save", OrderService, culture="fr-CA"))
    # Output: Enregistrer  (fr-CA falls back to the fr catalog)

# Example 6: Active culture taken from the environment (LC_ALL, LC_MESSAGES, LANG)
print("\n" + "=" * 50)
print("Example 6: System Culture")
print("=" * 50)

culture = get_system_locale()
key = just_this_localize_key("Greeting", OrderService)
print(f"{culture}: {localizer.localize_string_message(key, 'Hello', culture=culture)}")
# Output: en-US: Hello  (fr-FR: Bonjour when LANG=fr_FR.UTF-8)
