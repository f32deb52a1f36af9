import os

from dotenv import load_dotenv

load_dotenv()

OPTDEMOS_LOG_LEVEL = os.environ.get("OPTDEMOS_LOG_LEVEL", "WARNING")


def posixly_correct() -> bool:
    # getopt.gnu_getopt reads the same variable to stop at the first operand.
    return bool(os.environ.get("POSIXLY_CORRECT"))
