from trackr.models import Address, Employee


def test_seed_addresses_command(app):
    runner = app.test_cli_runner()
    result = runner.invoke(args=['seed-addresses', '--count', '5'])

    assert result.exit_code == 0, result.output
    assert '5 addresses created.' in result.output
    with app.app_context():
        assert Address.query.count() == 5
        assert Address.query.order_by(Address.id).first().street == 'street_0'


def test_seed_addresses_rejects_zero(app):
    result = app.test_cli_runner().invoke(args=['seed-addresses', '--count', '0'])
    assert result.exit_code != 0


def test_create_employee_command(app, client):
    runner = app.test_cli_runner()
    result = runner.invoke(args=[
        'create-employee',
        '--email', 'Lead@Trackr.local',
        '--first-name', 'Moritz',
        '--last-name', 'Schulze',
        '--role', 'supervisor',
        '--password', 'pw',
    ])

    assert result.exit_code == 0, result.output
    with app.app_context():
        employee = Employee.query.filter_by(email='lead@trackr.local').one()
        assert employee.role == 'supervisor'
        assert employee.check_password('pw')

    r = client.post('/login', json={'email': 'lead@trackr.local', 'password': 'pw'})
    assert r.get_json()['role'] == 'supervisor'


def test_create_employee_duplicate_email(app):
    args = ['create-employee', '--email', 'dup@trackr.local', '--first-name', '',
            '--last-name', '', '--role', 'employee', '--password', 'pw']
    runner = app.test_cli_runner()
    assert runner.invoke(args=args).exit_code == 0

    result = runner.invoke(args=args)
    assert result.exit_code != 0
    assert 'already exists' in result.output


def test_create_employee_unknown_role(app):
    result = app.test_cli_runner().invoke(args=[
        'create-employee', '--email', 'x@trackr.local', '--first-name', '',
        '--last-name', '', '--role', 'superadmin', '--password', 'pw',
    ])
    assert result.exit_code != 0
