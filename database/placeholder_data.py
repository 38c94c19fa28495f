# database/placeholder_data.py
"""
Demo rows loaded by init_db.py into an empty database.
Amounts are in cents.
"""

from datetime import date

users = [
    {
        "id": "410544b2-4001-4271-9855-fec4b6a6442a",
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    },
]

customers = [
    {
        "id": "3958dc9e-712f-4377-85e9-fec4b6a6442a",
        "name": "Delba de Oliveira",
        "email": "delba@oliveira.com",
        "image_url": "/customers/delba-de-oliveira.png",
    },
    {
        "id": "3958dc9e-742f-4377-85e9-fec4b6a6442a",
        "name": "Lee Robinson",
        "email": "lee@robinson.com",
        "image_url": "/customers/lee-robinson.png",
    },
    {
        "id": "3958dc9e-737f-4377-85e9-fec4b6a6442a",
        "name": "Hector Simpson",
        "email": "hector@simpson.com",
        "image_url": "/customers/hector-simpson.png",
    },
    {
        "id": "50ca3e18-62cd-11ee-8c99-0242ac120002",
        "name": "Steven Tey",
        "email": "steven@tey.com",
        "image_url": "/customers/steven-tey.png",
    },
    {
        "id": "3958dc9e-787f-4377-85e9-fec4b6a6442a",
        "name": "Steph Dietz",
        "email": "steph@dietz.com",
        "image_url": "/customers/steph-dietz.png",
    },
    {
        "id": "76d65c26-f784-44a2-ac19-586678f7c2f2",
        "name": "Michael Novotny",
        "email": "michael@novotny.com",
        "image_url": "/customers/michael-novotny.png",
    },
]

invoices = [
    {"customer": 0, "amount": 15795, "status": "pending", "date": date(2022, 12, 6)},
    {"customer": 1, "amount": 20348, "status": "pending", "date": date(2022, 11, 14)},
    {"customer": 4, "amount": 3040, "status": "paid", "date": date(2022, 10, 29)},
    {"customer": 3, "amount": 44800, "status": "paid", "date": date(2023, 9, 10)},
    {"customer": 5, "amount": 34577, "status": "pending", "date": date(2023, 8, 5)},
    {"customer": 2, "amount": 54246, "status": "pending", "date": date(2023, 7, 16)},
    {"customer": 0, "amount": 666, "status": "pending", "date": date(2023, 6, 27)},
    {"customer": 3, "amount": 32545, "status": "paid", "date": date(2023, 6, 9)},
    {"customer": 4, "amount": 1250, "status": "paid", "date": date(2023, 6, 17)},
    {"customer": 5, "amount": 8546, "status": "paid", "date": date(2023, 6, 7)},
    {"customer": 1, "amount": 500, "status": "paid", "date": date(2023, 8, 19)},
    {"customer": 5, "amount": 8945, "status": "paid", "date": date(2023, 6, 3)},
    {"customer": 2, "amount": 1000, "status": "paid", "date": date(2022, 6, 5)},
]

revenue = [
    {"month": "Jan", "revenue": 2000},
    {"month": "Feb", "revenue": 1800},
    {"month": "Mar", "revenue": 2200},
    {"month": "Apr", "revenue": 2500},
    {"month": "May", "revenue": 2300},
    {"month": "Jun", "revenue": 3200},
    {"month": "Jul", "revenue": 3500},
    {"month": "Aug", "revenue": 3700},
    {"month": "Sep", "revenue": 2500},
    {"month": "Oct", "revenue": 2800},
    {"month": "Nov", "revenue": 3000},
    {"month": "Dec", "revenue": 4800},
]
