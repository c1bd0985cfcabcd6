from ClientServices.models import EmployeeClientAssignment
from UserServices.models import User


def is_assigned(employee_id, client_id):
    return EmployeeClientAssignment.objects.filter(employee_id=employee_id, client_id=client_id).exists()


def is_direct_report(manager_id, employee_id):
    return User.objects.filter(id=employee_id, manager_id=manager_id).exists()
