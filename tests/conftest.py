import pytest
from werkzeug.security import generate_password_hash

from trackr import create_app
from trackr.config import TestingConfig
from trackr.extensions import db
from trackr.models import Employee
from trackr.services.addresses_service import seed_addresses


ADDRESS_JSON = {
    "street": "street_1",
    "houseNumber": "1",
    "city": "city_1",
    "zipCode": "12345",
    "country": "country_1",
}


@pytest.fixture()
def app(tmp_path):
    # Изолируем БД в tmp
    class _Config(TestingConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'test.db'}"
        ADMIN_EMAIL = "root@trackr.local"
        ADMIN_PASSWORD_HASH = generate_password_hash("secret")

    a = create_app(_Config)
    yield a

    with a.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def db_session(app):
    with app.app_context():
        yield db.session


@pytest.fixture()
def address(app):
    """Один из нескольких сгенерированных адресов (как словарь)."""
    with app.app_context():
        return seed_addresses(3)[1].to_dict()


def set_role(client, role, email=None):
    """Поместить роль в cookie-сессию клиента, как после /login."""
    with client.session_transaction() as sess:
        sess["role"] = role
        sess["email"] = email or f"{role}@trackr.local"


def admin_session(client):
    set_role(client, "admin")


def supervisor_session(client):
    set_role(client, "supervisor")


def basic_session(client):
    set_role(client, "employee")


def make_employee(email, password, role="employee", is_active=True):
    employee = Employee(email=email, role=role, is_active=is_active)
    employee.set_password(password)
    db.session.add(employee)
    db.session.commit()
    return employee
