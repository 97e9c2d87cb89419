import logging

from union_office.core.exceptions import UnauthorizedException, ValidationException
from union_office.models.role import UserRole
from union_office.models.tenant_context import TenantContext
from union_office.models.user import User
from union_office.repositories.office_repository import OfficeRepository
from union_office.repositories.session_repository import SessionRepository
from union_office.repositories.storage import StorageAdapter
from union_office.repositories.user_repository import UserRepository
from union_office.schemas.auth_schemas import RegisterRequest
from union_office.services.activity_service import ActivityService

logger = logging.getLogger(__name__)


class AuthService:
    """
    Session/auth gate: registration, login, current session and logout.

    Credentials are compared in plaintext, with no lockout or rate
    limiting.
    """

    def __init__(self, storage: StorageAdapter, activity: ActivityService | None = None):
        self.user_repo = UserRepository(storage)
        self.office_repo = OfficeRepository(storage)
        self.session_repo = SessionRepository(storage)
        self.activity = activity or ActivityService(storage)

    def register(self, data: RegisterRequest) -> User:
        """
        Register a new user and decide their office and role.

        The office name is matched against existing offices ignoring case
        and extra whitespace; no match creates a new office. The first user
        of an office becomes its OWNER, later users join as OPERATOR.

        Args:
            data: Registration form

        Returns:
            Created user (password stripped)

        Raises:
            ValidationException: If the email is already registered
        """
        if self.user_repo.get_by_email(data.email):
            raise ValidationException("Email already registered")

        office = self.office_repo.get_by_name(data.office_name)
        if office is None:
            office = self.office_repo.create(data.office_name)
            logger.info("Created office %s (%s)", office.id, office.name)

        # Ownership goes to the first user stored under the office, not its creator
        role = UserRole.OPERATOR if self.user_repo.get_by_tenant(office.id) else UserRole.OWNER

        user = User(
            email=data.email,
            password=data.password,
            office_name=data.office_name,
            operator_name=data.operator_name,
            role=role,
            sede_id=office.id,
        )
        self.user_repo.create(user)

        self.activity.log(user, "Registration", f"New account created for office: {office.name}")
        logger.info("Registered user %s as %s of office %s", user.id, role.value, office.id)
        return user.sanitized()

    def authenticate(self, email: str, password: str) -> User | None:
        """
        Check credentials and open the current session.

        Returns:
            The user without password, or None when email and password do
            not both match a stored user
        """
        user = self.user_repo.get_by_credentials(email, password)
        if user is None:
            logger.info("Failed login attempt for %s", email)
            return None

        session_user = user.sanitized()
        self.session_repo.set_current(session_user)
        self.activity.log(session_user, "Login", "Signed in to the office workspace")
        return session_user

    def current_session(self) -> User | None:
        return self.session_repo.get_current()

    def logout(self, user: User | None = None) -> None:
        """Close the current session, logging it for the user that held it"""
        session_user = user or self.session_repo.get_current()
        if session_user is not None:
            self.activity.log(session_user, "Logout", "Session closed")
        self.session_repo.clear()

    def get_context(self, user_id: str, sede_id: str) -> TenantContext:
        """
        Build the tenant context for a token's claims.

        Raises:
            UnauthorizedException: If the user no longer exists or the
                token's office does not match the user's office
        """
        user = self.user_repo.get_by_id(user_id)
        if user is None or user.sede_id != sede_id:
            raise UnauthorizedException("Unknown user or office")
        return TenantContext(user=user.sanitized())
