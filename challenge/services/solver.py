import logging
import re
import textwrap

logger = logging.getLogger("challenge.solver")

# -------------------------------------------------
# Question 1: highest salary not paid on the 1st of
# a month, with the employee's name, age and department
# -------------------------------------------------

QUESTION_1_SQL = textwrap.dedent("""
    SELECT
        p.AMOUNT AS SALARY,
        CONCAT(e.FIRST_NAME, ' ', e.LAST_NAME) AS NAME,
        TIMESTAMPDIFF(YEAR, e.DOB, CURDATE()) AS AGE,
        d.DEPARTMENT_NAME
    FROM PAYMENTS p
    INNER JOIN EMPLOYEE e ON p.EMP_ID = e.EMP_ID
    INNER JOIN DEPARTMENT d ON e.DEPARTMENT = d.DEPARTMENT_ID
    WHERE DAY(p.PAYMENT_TIME) != 1
    ORDER BY p.AMOUNT DESC
    LIMIT 1
""").strip()

SOLUTIONS = {
    1: QUESTION_1_SQL,
}


def question_for(reg_no: str) -> int:
    """
    Odd last two digits -> question 1, even -> question 2.
    """
    match = re.search(r"(\d{1,2})$", reg_no.strip())
    if not match:
        raise ValueError(f"Registration number {reg_no!r} does not end in digits")

    return 1 if int(match.group(1)) % 2 else 2


def compute_answer() -> str:
    logger.info("Solving SQL problem 1...")
    return SOLUTIONS[1]
