class StackpilotError(Exception):
    exit_code = 1
    silent = False
