"""Auto-discovery of command modules.

Every .py file in this package that defines a `command` object is
auto-registered by pixelify.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary. Without them, pkgutil.iter_modules cannot find
the command files at runtime.
"""

# PyInstaller hidden imports — keep this list in sync with command modules
import pixelify.commands.all as _all  # noqa: F401
import pixelify.commands.colours as _colours  # noqa: F401
import pixelify.commands.copy as _copy  # noqa: F401
import pixelify.commands.html as _html  # noqa: F401
import pixelify.commands.preview as _preview  # noqa: F401

# Used by pixelify.registry when pkgutil cannot list the package (frozen builds)
COMMAND_MODULES = ('all', 'colours', 'copy', 'html', 'preview')
