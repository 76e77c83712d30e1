"""Constants and defaults.

Note: Keep action names here so every gateway speaks the same protocol.
"""

DEFAULT_REQUEST_TIMEOUT = 30.0

ACTION_GET_EMPLOYEES = "getEmployees"
ACTION_ADD_EMPLOYEE = "addEmployee"
ACTION_UPDATE_EMPLOYEE = "updateEmployee"
ACTION_DELETE_EMPLOYEE = "deleteEmployee"
ACTION_REFRESH_EMPLOYEE_CACHE = "refreshEmployeeCache"
ACTION_GENERATE_REPORT = "generateReport"
ACTION_ADJUST_ATTENDANCE = "adjustAttendance"

MISSING_ENDPOINT_MESSAGE = "Remote endpoint URL is not set."
INVALID_JSON_MESSAGE = "Invalid JSON response from server."
