from utils.datetime_utils import parse_date, utcnow
from utils.db import NEWEST_FIRST

# Fields a client may set on an employee
EDITABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "gender",
    "designation",
    "salary",
    "date_of_joining",
    "department",
    "employee_photo",
)


class Employee:

    COLLECTION = "employees"

    def __init__(self, first_name, last_name, email, gender, designation, salary,
                 date_of_joining, department, employee_photo=""):
        self.first_name = first_name.strip()
        self.last_name = last_name.strip()
        self.email = email.strip().lower()
        self.gender = gender
        self.designation = designation.strip()
        self.salary = float(salary)
        self.date_of_joining = parse_date(date_of_joining)
        self.department = department.strip()
        self.employee_photo = employee_photo or ""
        self.created_at = utcnow()
        self.updated_at = self.created_at

    @classmethod
    def from_input(cls, data, employee_photo=""):
        fields = {k: data.get(k) for k in EDITABLE_FIELDS if k != "employee_photo"}
        return cls(employee_photo=employee_photo, **fields)

    # Convert to dictionary for MongoDB
    def to_dict(self):
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "gender": self.gender,
            "designation": self.designation,
            "salary": self.salary,
            "date_of_joining": self.date_of_joining,
            "department": self.department,
            "employee_photo": self.employee_photo,
            "created_at": self.created_at,
            "updated_at": self.updated_at
        }

    def save(self, store):
        return store.create(Employee.COLLECTION, self.to_dict())

    @staticmethod
    def all(store):
        return store.find(Employee.COLLECTION, sort=NEWEST_FIRST)

    @staticmethod
    def find_by_id(store, employee_id):
        return store.find_by_id(Employee.COLLECTION, employee_id)

    # AND-filter over whichever of designation/department is given
    @staticmethod
    def search(store, designation=None, department=None):
        query = {}
        if designation:
            query["designation"] = designation
        if department:
            query["department"] = department
        return store.find(Employee.COLLECTION, query, sort=NEWEST_FIRST)

    @staticmethod
    def update(store, employee_id, changes):
        return store.update_by_id(Employee.COLLECTION, employee_id, Employee.changes_to_set(changes))

    @staticmethod
    def delete(store, employee_id):
        return store.delete_by_id(Employee.COLLECTION, employee_id)

    @staticmethod
    def changes_to_set(changes):
        """
        Build the $set document for a partial update. Unknown keys and
        explicit nulls are dropped, values are normalized the same way
        the constructor does it and updated_at is always refreshed.
        """
        update = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS and v is not None}
        for key in ("first_name", "last_name", "designation", "department"):
            if key in update:
                update[key] = str(update[key]).strip()
        if "email" in update:
            update["email"] = str(update["email"]).strip().lower()
        if "salary" in update:
            update["salary"] = float(update["salary"])
        if "date_of_joining" in update:
            update["date_of_joining"] = parse_date(update["date_of_joining"])
        update["updated_at"] = utcnow()
        return update
