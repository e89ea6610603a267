"""Base model for GitHub records whose fields are all optional.

The GitHub admin API accepts partial updates: any field left out of a
``PATCH`` body is left unchanged on the server. A field that was never set
must therefore never be sent, not even as ``null`` or an empty value, since
``""``, ``0`` and `False` are all meaningful values that would overwrite
what the server has.

Every field of a record derived from `OptionalFieldsModel` is declared as
``T | None`` with a default of `None`, and `None` is the absent state. JSON
``null`` in a response decodes to absent, matching GitHub's own convention
of returning ``null`` for unset attributes.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, get_args

from pydantic import BaseModel, ConfigDict

__all__ = ["OptionalFieldsModel"]

_ZERO_VALUES: dict[type, Any] = {bool: False, float: 0.0, int: 0, str: ""}
"""Zero values returned by `OptionalFieldsModel.get_value`."""


class OptionalFieldsModel(BaseModel):
    """A GitHub API record in which every field may be absent.

    Construct records by passing plain values as keyword arguments. Only the
    fields passed are present; everything else is absent.

    Two records compare equal only if each field is absent in both or present
    in both with equal values. A field that is absent is never equal to the
    same field set to ``""``, ``0`` or `False`.

    Examples
    --------
    >>> mapping = UserLDAPMapping(ldap_dn="uid=someuser,ou=users,dc=example")
    >>> mapping.to_payload()
    {'ldap_dn': 'uid=someuser,ou=users,dc=example'}
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True)

    def get_value(self, name: str) -> Any:
        """Read a field, substituting the zero value if it is absent.

        This is a convenience for callers that do not care whether a field
        was present. An empty string, zero, or `False` returned by this
        method does **not** mean that GitHub reported that value: it may
        equally mean that the field was missing from the response. Use
        `is_set` to tell the two apart.

        Parameters
        ----------
        name
            Name of the field.

        Returns
        -------
        typing.Any
            The value of the field if present. Otherwise ``""`` for strings,
            ``0`` for integers, ``0.0`` for floats, `False` for booleans, and
            `None` for any other type (timestamps and nested records).

        Raises
        ------
        AttributeError
            Raised if the record has no field by that name.
        """
        field = self._get_field_annotation(name)
        value = getattr(self, name)
        if value is not None:
            return value
        for arg in get_args(field):
            if arg in _ZERO_VALUES:
                return _ZERO_VALUES[arg]
        return None

    def is_set(self, name: str) -> bool:
        """Whether the given field is present.

        Parameters
        ----------
        name
            Name of the field.

        Returns
        -------
        bool
            `True` if the field has a value, `False` if it is absent.

        Raises
        ------
        AttributeError
            Raised if the record has no field by that name.
        """
        self._get_field_annotation(name)
        return getattr(self, name) is not None

    def to_payload(self) -> dict[str, Any]:
        """Serialize the record for a request body.

        Absent fields are omitted entirely, including absent fields of
        nested records. Present fields are included with their exact value,
        even if that value is empty, zero or `False`.

        Returns
        -------
        dict
            JSON-compatible representation of the present fields.
        """
        return self.model_dump(mode="json", exclude_none=True)

    def __repr_args__(self) -> Iterable[tuple[str | None, Any]]:
        # Only show present fields.
        for key, value in super().__repr_args__():
            if value is not None:
                yield key, value

    def _get_field_annotation(self, name: str) -> Any:
        fields = type(self).model_fields
        if name not in fields:
            cls = type(self).__name__
            raise AttributeError(f"{cls} has no field {name}")
        return fields[name].annotation
