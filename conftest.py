import pytest
from rest_framework.test import APIClient

from ClientServices.models import Client, EmployeeClientAssignment
from UserServices.models import User


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def manager(db):
    return User.objects.create_user(username='maria', password='s3cret-pass', role='manager', first_name='Maria')


@pytest.fixture
def employee(db, manager):
    return User.objects.create_user(username='eric', password='s3cret-pass', role='employee', first_name='Eric', manager=manager)


@pytest.fixture
def other_employee(db):
    return User.objects.create_user(username='olga', password='s3cret-pass', role='employee')


@pytest.fixture
def client_site(db):
    return Client.objects.create(name='Acme Gurgaon', address='Cyber City', latitude=28.4595, longitude=77.0266)


@pytest.fixture
def assignment(employee, client_site):
    return EmployeeClientAssignment.objects.create(employee=employee, client=client_site)


@pytest.fixture
def as_user(api_client):
    def authenticate(user):
        api_client.force_authenticate(user=user)
        return api_client
    return authenticate
