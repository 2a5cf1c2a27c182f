import pytest

from insurance_platform.app.models.role import Role, RoleName
from insurance_platform.app.models.user import User

# Valid default data for tests
VALID_USERNAME = "testuser"
VALID_EMAIL = "test@example.com"
VALID_PASSWORD = "hashed_password"


def test_user_creation_successful():
    """Test successful creation, including stripping of whitespace from fields."""
    user = User(
        username=f" {VALID_USERNAME} ",
        email=f" {VALID_EMAIL} ",
        hashed_password=f" {VALID_PASSWORD} ",
        is_active=True,
        force_password_change=True,
    )
    assert user.username == VALID_USERNAME
    assert user.email == VALID_EMAIL
    assert user.hashed_password == VALID_PASSWORD
    assert user.is_active is True
    assert user.force_password_change is True
    assert user.roles == []


def test_user_defaults_and_id():
    """Test the default flags and the optional id argument."""
    user = User(
        username=VALID_USERNAME,
        email=VALID_EMAIL,
        hashed_password=VALID_PASSWORD,
        id=7,
    )
    assert user.id == 7
    assert user.is_active is True
    assert user.force_password_change is False


@pytest.mark.parametrize(
    "username, error_msg",
    [
        (123, "Username must be a string"),
        ("", "Username cannot be empty"),
        ("   ", "Username cannot be empty"),
    ],
)
def test_validate_username_failures(username, error_msg):
    """Test validate_username raises ValueError for invalid inputs."""
    with pytest.raises(ValueError, match=error_msg):
        User(username=username, email=VALID_EMAIL, hashed_password=VALID_PASSWORD)


@pytest.mark.parametrize(
    "email, error_msg",
    [
        (123, "Email must be a string"),
        ("", "Email cannot be empty"),
        ("   ", "Email cannot be empty"),
    ],
)
def test_validate_email_failures(email, error_msg):
    """Test validate_email raises ValueError for invalid inputs."""
    with pytest.raises(ValueError, match=error_msg):
        User(username=VALID_USERNAME, email=email, hashed_password=VALID_PASSWORD)


@pytest.mark.parametrize(
    "password, error_msg",
    [
        (123, "Hashed password must be a string"),
        ("", "Hashed password cannot be empty"),
        ("   ", "Hashed password cannot be empty"),
    ],
)
def test_validate_hashed_password_failures(password, error_msg):
    """Test validate_hashed_password raises ValueError for invalid inputs."""
    with pytest.raises(ValueError, match=error_msg):
        User(username=VALID_USERNAME, email=VALID_EMAIL, hashed_password=password)


@pytest.mark.parametrize("field", ["is_active", "force_password_change"])
def test_validate_flags_failures(field):
    """Test boolean flags reject non-boolean values."""
    kwargs = {
        "username": VALID_USERNAME,
        "email": VALID_EMAIL,
        "hashed_password": VALID_PASSWORD,
        field: "yes",
    }
    with pytest.raises(ValueError, match=f"{field} must be a boolean"):
        User(**kwargs)


def test_role_assignment():
    """Test that a role can be attached to a user and is visible from both sides."""
    user = User(username=VALID_USERNAME, email=VALID_EMAIL, hashed_password=VALID_PASSWORD)
    role = Role(name=RoleName.ADMIN.value)
    user.roles.append(role)
    assert [r.name for r in user.roles] == ["ADMIN"]
    assert role.users == [user]
