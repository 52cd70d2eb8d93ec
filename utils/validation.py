"""Form validation helpers used by the sign-up and onboarding screens."""
import re
from dataclasses import dataclass, field
from typing import List, Optional

_EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
_TEAM_NAME_RE = re.compile(r'^[a-zA-Z0-9\s\-()&.,]+$')
_PHONE_STRIP_RE = re.compile(r'[\s\-().]')


@dataclass
class ValidationError:
    field: str
    message: str


@dataclass
class ValidationResult:
    errors: List[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def messages(self) -> List[str]:
        return [e.message for e in self.errors]


@dataclass
class PasswordCheck:
    is_valid: bool
    strength: str  # weak | medium | strong
    errors: List[str]


def validate_email(email: str) -> bool:
    return bool(email) and bool(_EMAIL_RE.match(email))


def validate_password(password: str) -> PasswordCheck:
    errors = []
    if len(password) < 8:
        errors.append('Password must be at least 8 characters')
    if not re.search(r'[A-Z]', password):
        errors.append('Password must contain at least one uppercase letter')
    if not re.search(r'[a-z]', password):
        errors.append('Password must contain at least one lowercase letter')
    if not re.search(r'[0-9]', password):
        errors.append('Password must contain at least one number')

    strength = 'weak'
    if not errors:
        strength = 'strong'
    elif len(errors) == 1:
        strength = 'medium'
    return PasswordCheck(is_valid=not errors, strength=strength, errors=errors)


def validate_team_name(name: str) -> ValidationResult:
    result = ValidationResult()
    stripped = (name or '').strip()
    if not stripped:
        result.errors.append(ValidationError('teamName', 'Team name is required'))
    elif len(stripped) < 3:
        result.errors.append(ValidationError('teamName', 'Team name must be at least 3 characters'))
    elif len(stripped) > 50:
        result.errors.append(ValidationError('teamName', 'Team name must not exceed 50 characters'))

    # Checked on the raw value, so an empty name reports both errors
    if not _TEAM_NAME_RE.match(name or ''):
        result.errors.append(ValidationError('teamName', 'Team name contains invalid characters'))
    return result


def validate_phone(phone: Optional[str]) -> ValidationResult:
    result = ValidationResult()
    if phone and phone.strip():
        clean = _PHONE_STRIP_RE.sub('', phone)
        if not re.fullmatch(r'[0-9]{10,}', clean):
            result.errors.append(ValidationError('phone', 'Please enter a valid phone number'))
    return result


def validate_required(value: Optional[str], field_name: str) -> ValidationResult:
    result = ValidationResult()
    if not value or not value.strip():
        result.errors.append(ValidationError(field_name, f'{field_name} is required'))
    return result


def validate_team_creation(team_name: str, sport: Optional[str] = None,
                           location: Optional[str] = None) -> ValidationResult:
    result = ValidationResult(errors=list(validate_team_name(team_name).errors))
    if location and location.strip():
        if not 3 <= len(location.strip()) <= 100:
            result.errors.append(ValidationError('location', 'Location must be between 3 and 100 characters'))
    if not sport:
        result.errors.append(ValidationError('sport', 'Sport selection is required'))
    return result


def validate_profile_setup(name: str, phone: Optional[str] = None) -> ValidationResult:
    result = ValidationResult(errors=list(validate_required(name, 'Full name').errors))
    if name and len(name.strip()) > 100:
        result.errors.append(ValidationError('name', 'Full name must not exceed 100 characters'))
    result.errors.extend(validate_phone(phone or '').errors)
    return result
