# client/gen_data.py
import random
from datetime import date, timedelta

COUNTRIES = ["BH", "AR", "BR", "CO", "PE", "UY", "CL", "MX"]
MANAGERS  = ["SERGIO LACAMBRA AYUSO", "ANA TORRES", "LUIS MEDINA", "CARLA RUIZ", "JORGE PAZ"]
TITLES    = ["Strengthening Disaster", "Water and Sanitation", "Urban Mobility Program",
             "Digital Government", "Energy Transition", "Rural Roads"]
SECTORS   = ["RND", "WSA", "TSP", "ENE", "EDU"]

def _amount(): return f"{random.randint(1, 400) * 500000:.2f}"
def _date(): return (date(2024, 1, 1) + timedelta(days=random.randint(0, 365))).isoformat()

def gen_project_record(rid: int):
    c = random.choice(COUNTRIES)
    n = random.randint(1000, 1999)
    return {
        "id": rid,
        "code": f"{c}-L{n}",
        "title": random.choice(TITLES),
        "loanNumber": f"{random.randint(4000, 5999)}/OC-{c}",
        "field1": _amount(),
        "field2": _amount(),
        "field3": f"{random.uniform(0, 200):.6f}",
        "field6": str(random.randint(1, 5)),
        "field7": random.choice(MANAGERS),
        "field8": _date(),
        "field9": random.choice(SECTORS),
        "field11": c,
        "field12": random.choice(["Not applicable", "Pending", "Approved"]),
        "frontendId": f"{random.randint(100, 999)}-{random.randint(10, 99)}",
    }

def gen_project_records(n: int, start_id: int = 6873):
    return [gen_project_record(start_id + i) for i in range(n)]
