# families/services.py
"""
Service functions for the families application.

The ownership lookup :func:`get_owned_child` is shared by every
operation addressing a child on behalf of a parent, including the
enrollment rules of the activities application.
"""

import logging

from portail_famille.errors import ErrorCode, create_error, data_access

from .models import Child

logger = logging.getLogger(__name__)


def get_owned_child(parent, child_id: int) -> Child:
    """
    Return the child ``child_id`` if it belongs to ``parent``.

    A first query filters on both the id and the parent. When it
    finds nothing, a second query on the id alone tells a missing
    child apart from a child owned by another parent.

    Parameters
    ----------
    parent : User
        The authenticated parent.
    child_id : int
        Identifier of the child.

    Returns
    -------
    Child
        The owned child.

    Raises
    ------
    ApiError
        ``CHILD_NOT_FOUND`` when no child has this id,
        ``CHILD_NOT_OWNED`` when it belongs to another parent,
        ``INTERNAL_ERROR`` on a data-access failure.
    """
    with data_access("child ownership lookup"):
        child = Child.objects.filter(pk=child_id, parent=parent).first()
        if child is not None:
            return child
        exists = Child.objects.filter(pk=child_id).exists()

    if not exists:
        raise create_error(ErrorCode.CHILD_NOT_FOUND, "Child not found")
    raise create_error(ErrorCode.CHILD_NOT_OWNED, "Child does not belong to authenticated parent")


def list_children(parent) -> list:
    """Return the children of ``parent`` as dictionaries."""
    with data_access("list children"):
        return [child.to_dict() for child in Child.objects.filter(parent=parent)]


def create_child(parent, data: dict) -> Child:
    """
    Create a child owned by ``parent``.

    Parameters
    ----------
    parent : User
        The authenticated parent, never taken from the request body.
    data : dict
        Cleaned data of :class:`families.forms.ChildForm`.

    Returns
    -------
    Child
        The created child.
    """
    with data_access("create child"):
        child = Child.objects.create(
            parent=parent,
            first_name=data["first_name"],
            last_name=data["last_name"],
            birth_date=data["birth_date"],
            description=data.get("description"),
        )
    logger.info("Child %s created for parent %s", child.pk, parent.pk)
    return child


def update_child(parent, child_id: int, changes: dict) -> Child:
    """
    Apply a partial update to an owned child.

    Raises
    ------
    ApiError
        Same codes as :func:`get_owned_child`.
    """
    child = get_owned_child(parent, child_id)
    for name, value in changes.items():
        setattr(child, name, value)
    with data_access("update child"):
        child.save(update_fields=list(changes))
    return child
