# accounts/services.py
"""
Service functions for accounts.

This module covers the registration of parents, the profile of the
authenticated parent, and the administration of parent accounts.
Parents are identified by the primary key of their user.
"""

import logging

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.db.models import Count, Q

from portail_famille.errors import ErrorCode, create_error, data_access
from portail_famille.pagination import paginate

from .models import UserProfile

logger = logging.getLogger(__name__)

User = get_user_model()


def _email_taken():
    return create_error(
        ErrorCode.VALIDATION_ERROR,
        "Invalid request",
        details={
            "issues": [
                {"path": ["email"], "message": "An account already exists for this e-mail.", "code": "unique"}
            ]
        },
    )


def serialize_profile(profile: UserProfile) -> dict:
    """
    Return the public representation of a profile.

    Parameters
    ----------
    profile : UserProfile
        The profile to expose.

    Returns
    -------
    dict
        ``{id, email, first_name, last_name, role, created_at}``
    """
    return {
        "id": profile.user_id,
        "email": profile.user.email,
        "first_name": profile.first_name or "",
        "last_name": profile.last_name or "",
        "role": profile.role,
        "created_at": profile.created_at.isoformat(),
    }


def register_parent(data: dict):
    """
    Create a user with a parent profile.

    Parameters
    ----------
    data : dict
        Cleaned data of :class:`accounts.forms.SignUpForm`.

    Returns
    -------
    User
        The created user. The e-mail doubles as the username.

    Raises
    ------
    ApiError
        ``VALIDATION_ERROR`` when another sign-up took the e-mail after
        the form was validated.
    """
    with data_access("register parent"):
        with transaction.atomic():
            try:
                with transaction.atomic():
                    user = User.objects.create_user(
                        username=data["email"],
                        email=data["email"],
                        password=data["password"],
                        first_name=data["first_name"],
                        last_name=data["last_name"],
                    )
            except IntegrityError as exc:
                raise _email_taken() from exc
            UserProfile.objects.update_or_create(
                user=user,
                defaults={
                    "role": UserProfile.Role.PARENT,
                    "first_name": data["first_name"],
                    "last_name": data["last_name"],
                },
            )
    logger.info("Parent account %s registered", user.pk)
    return user


def update_profile(profile: UserProfile, data: dict) -> dict:
    """
    Replace the names of a profile.

    Parameters
    ----------
    profile : UserProfile
        Profile of the authenticated parent.
    data : dict
        Cleaned data of :class:`accounts.forms.ProfileForm`.
    """
    profile.first_name = data["first_name"]
    profile.last_name = data["last_name"]
    with data_access("update profile"):
        profile.save(update_fields=["first_name", "last_name"])
    return serialize_profile(profile)


def _parents():
    return UserProfile.objects.filter(role=UserProfile.Role.PARENT).select_related("user")


def list_parents(page: int, limit: int, search: str = "") -> dict:
    """
    Return one page of parent accounts, newest first.

    Parameters
    ----------
    page : int
        Page number.
    limit : int
        Page size.
    search : str
        Case-insensitive filter on the first or last name.

    Returns
    -------
    dict
        ``{"parents": [...], "pagination": {...}}`` where every item
        carries ``children_count``.
    """
    with data_access("list parents"):
        queryset = _parents()
        if search:
            queryset = queryset.filter(Q(first_name__icontains=search) | Q(last_name__icontains=search))
        queryset = queryset.annotate(children_count=Count("user__children", distinct=True)).order_by(
            "-created_at", "-id"
        )
        items, pagination = paginate(queryset, page, limit)
    parents = []
    for profile in items:
        parents.append(
            {
                "id": profile.user_id,
                "first_name": profile.first_name or "",
                "last_name": profile.last_name or "",
                "email": profile.user.email,
                "created_at": profile.created_at.isoformat(),
                "children_count": profile.children_count,
            }
        )
    return {"parents": parents, "pagination": pagination}


def get_parent(parent_id: int) -> dict:
    """
    Return a parent account with its children.

    Raises
    ------
    ApiError
        ``PARENT_NOT_FOUND`` when no parent has this id.
    """
    from families.models import Child

    with data_access("get parent"):
        profile = _parents().filter(user_id=parent_id).first()
        if profile is None:
            raise create_error(ErrorCode.PARENT_NOT_FOUND, "Parent not found")
        children = Child.objects.filter(parent_id=parent_id).annotate(
            enrollments_count=Count("enrollments", distinct=True)
        )
        return {
            "id": profile.user_id,
            "first_name": profile.first_name or "",
            "last_name": profile.last_name or "",
            "email": profile.user.email,
            "created_at": profile.created_at.isoformat(),
            "children": [
                {
                    "id": child.pk,
                    "first_name": child.first_name,
                    "last_name": child.last_name,
                    "birth_date": child.birth_date.isoformat(),
                    "enrollments_count": child.enrollments_count,
                }
                for child in children
            ],
        }


def delete_parent(parent_id: int) -> dict:
    """
    Delete a parent account with its children and their enrollments.

    Returns
    -------
    dict
        ``{message, deleted_children, deleted_enrollments}``

    Raises
    ------
    ApiError
        ``PARENT_NOT_FOUND`` when the account does not exist,
        ``VALIDATION_ERROR`` when it is an administrator.
    """
    from activities.models import Enrollment
    from families.models import Child

    with data_access("delete parent"):
        with transaction.atomic():
            profile = UserProfile.objects.select_related("user").filter(user_id=parent_id).first()
            if profile is None:
                raise create_error(ErrorCode.PARENT_NOT_FOUND, "Parent not found")
            if profile.is_admin:
                raise create_error(ErrorCode.VALIDATION_ERROR, "Cannot delete admin account")
            deleted_children = Child.objects.filter(parent_id=parent_id).count()
            deleted_enrollments = Enrollment.objects.filter(child__parent_id=parent_id).count()
            profile.user.delete()
    logger.info(
        "Parent %s deleted with %s children and %s enrollments",
        parent_id,
        deleted_children,
        deleted_enrollments,
    )
    return {
        "message": "Parent account and all associated data deleted successfully",
        "deleted_children": deleted_children,
        "deleted_enrollments": deleted_enrollments,
    }
