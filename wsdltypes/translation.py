#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""
Translation of the error messages raised by the schema readers. No catalog
is shipped with the package: an application that wants translated messages
provides its own directory of compiled catalogs for the 'wsdltypes' domain.
"""
import gettext as _gettext
from pathlib import Path
from typing import Any, Iterable, Optional, Union

__all__ = ['DOMAIN', 'activate', 'deactivate', 'gettext']

DOMAIN = 'wsdltypes'

_translation: Any = None


def activate(localedir: Union[str, Path],
             languages: Optional[Iterable[str]] = None,
             fallback: bool = True) -> None:
    """
    Activate translation of parse error messages.

    :param localedir: the directory containing the `<lang>/LC_MESSAGES/wsdltypes.mo` files.
    :param languages: list of language codes, for default the ones of the environment.
    :param fallback: if `False` raises an `OSError` when no catalog is found.
    """
    global _translation
    _translation = _gettext.translation(
        domain=DOMAIN,
        localedir=localedir,
        languages=languages,
        fallback=fallback,
    )


def deactivate() -> None:
    global _translation
    _translation = None


def gettext(message: str) -> str:
    if _translation is None:
        return message
    return str(_translation.gettext(message))
