#
# Copyright (c), 2016-2024, SISSA (International School for Advanced Studies).
# All rights reserved.
# This file is distributed under the terms of the MIT License.
# See the file 'LICENSE' in the root directory of the present
# distribution, or http://opensource.org/licenses/MIT.
#
# @author Davide Brunato <brunato@sissa.it>
#
"""Helper functions for QNames and component collections."""
from collections.abc import Iterable
from typing import Any, Optional, Tuple, TypeVar

from wsdltypes.exceptions import WsdlTypesTypeError, WsdlTypesValueError

T = TypeVar('T')


def get_namespace(qname: str) -> str:
    """
    Returns the namespace URI associated with a QName in extended form or a local name.
    If the argument is not conformant to QName format returns the empty string, which
    means no namespace.
    """
    try:
        if qname[0] != '{':
            return ''
        namespace, _ = qname[1:].split('}')
    except (IndexError, ValueError):
        return ''
    except TypeError:
        raise WsdlTypesTypeError("the argument must be a string-like object")
    else:
        return namespace


def get_qname(uri: Optional[str], name: str) -> str:
    """
    Returns an expanded QName from URI and local part. If any argument has boolean value
    `False` or if the name is already an expanded QName, returns the *name* argument.

    :param uri: namespace URI
    :param name: local or qualified name
    :return: string or the name argument
    """
    try:
        if name[0] in '{./[' or not uri:
            return name
    except IndexError:
        return ''
    except TypeError:
        raise WsdlTypesTypeError("the 2nd argument must be a string-like object")
    else:
        return f'{{{uri}}}{name}'


def local_name(qname: str) -> str:
    """
    Return the local part of an expanded QName or a prefixed name. If the name
    is `None` or empty returns the *name* argument.

    :param qname: an expanded QName or a prefixed name or a local name.
    """
    try:
        if qname[0] == '{':
            _namespace, qname = qname.split('}')
        elif ':' in qname:
            _prefix, qname = qname.split(':')
    except IndexError:
        return ''
    except ValueError:
        raise WsdlTypesValueError("the argument 'qname' has an invalid value %r" % qname)
    except TypeError:
        raise WsdlTypesTypeError("the argument 'qname' must be a string-like object")
    else:
        return qname


def split_tag(tag: str) -> Tuple[Optional[str], str]:
    """
    Splits an ElementTree tag into a couple with the namespace URI and
    the local name. The namespace is `None` for unqualified tags.
    """
    if tag[0] == '{':
        namespace, name = tag[1:].split('}')
        return namespace, name
    return None, tag


def find_by_name(components: Iterable[T], name: Optional[str]) -> Optional[T]:
    """
    Linear search of a component by name. Returns the first
    component with a matching name attribute or `None`.
    """
    for component in components:
        if getattr(component, 'name', None) == name:
            return component
    return None


def is_source_path(source: Any) -> bool:
    """Returns `True` if the argument refers to a file path and not to XML data."""
    if isinstance(source, str):
        if not source.strip():
            return False
        return not ('\n' in source or source.lstrip().startswith('<'))
    return hasattr(source, '__fspath__')
