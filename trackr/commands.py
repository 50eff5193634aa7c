"""Flask CLI commands."""

from __future__ import annotations

import click
from flask import Flask
from flask.cli import with_appcontext

from .extensions import db
from .models import Employee
from .services.addresses_service import seed_addresses
from .services.permissions_service import Role


@click.command('create-employee')
@click.option('--email', prompt=True)
@click.option('--first-name', default='', prompt=True)
@click.option('--last-name', default='', prompt=True)
@click.option('--role', type=click.Choice([r.value for r in Role]), default=Role.EMPLOYEE.value, prompt=True)
@click.option('--password', prompt=True, hide_input=True, confirmation_prompt=True)
@with_appcontext
def create_employee(email: str, first_name: str, last_name: str, role: str, password: str) -> None:
    """Создаёт сотрудника с указанной ролью."""
    email = email.strip().lower()
    if Employee.query.filter_by(email=email).first():
        raise click.ClickException('Employee with the same email already exists')

    employee = Employee(
        email=email,
        first_name=first_name or None,
        last_name=last_name or None,
        role=role,
        is_active=True,
    )
    employee.set_password(password)
    db.session.add(employee)
    db.session.commit()
    click.echo(f'Employee {email} ({role}) created.')


@click.command('seed-addresses')
@click.option('--count', type=click.IntRange(min=1), default=10, show_default=True)
@with_appcontext
def seed_addresses_command(count: int) -> None:
    """Заполняет таблицу адресов тестовыми данными."""
    items = seed_addresses(count)
    click.echo(f'{len(items)} addresses created.')


def register_commands(app: Flask) -> None:
    app.cli.add_command(create_employee)
    app.cli.add_command(seed_addresses_command)
