from __future__ import annotations

import sqlite3
from pathlib import Path

import pytest

from src.utils import database, db_init

SCHEMA = """
CREATE TABLE Categories (
    CategoryID INTEGER PRIMARY KEY,
    CategoryName TEXT,
    Description TEXT
);
CREATE TABLE Suppliers (
    SupplierID INTEGER PRIMARY KEY,
    CompanyName TEXT,
    ContactName TEXT,
    City TEXT,
    Country TEXT
);
CREATE TABLE Products (
    ProductID INTEGER PRIMARY KEY,
    ProductName TEXT,
    SupplierID INTEGER REFERENCES Suppliers(SupplierID),
    CategoryID INTEGER REFERENCES Categories(CategoryID),
    QuantityPerUnit TEXT,
    UnitPrice NUMERIC,
    UnitsInStock INTEGER,
    UnitsOnOrder INTEGER,
    ReorderLevel INTEGER,
    Discontinued TEXT
);
CREATE TABLE Customers (
    CustomerID TEXT PRIMARY KEY,
    CompanyName TEXT,
    ContactName TEXT,
    City TEXT,
    Region TEXT,
    Country TEXT
);
CREATE TABLE Employees (
    EmployeeID INTEGER PRIMARY KEY,
    LastName TEXT,
    FirstName TEXT,
    Title TEXT,
    ReportsTo INTEGER
);
CREATE TABLE Orders (
    OrderID INTEGER PRIMARY KEY,
    CustomerID TEXT REFERENCES Customers(CustomerID),
    EmployeeID INTEGER REFERENCES Employees(EmployeeID),
    OrderDate DATETIME,
    ShippedDate DATETIME,
    Freight NUMERIC,
    ShipCountry TEXT
);
CREATE TABLE "Order Details" (
    OrderID INTEGER REFERENCES Orders(OrderID),
    ProductID INTEGER REFERENCES Products(ProductID),
    UnitPrice NUMERIC,
    Quantity INTEGER,
    Discount REAL,
    PRIMARY KEY (OrderID, ProductID)
);
"""

ROWS = {
    "Categories": [
        (1, "Beverages", "Soft drinks, coffees, teas, beers, and ales"),
        (2, "Condiments", "Sweet and savory sauces, relishes, spreads, and seasonings"),
        (3, "Confections", "Desserts, candies, and sweet breads"),
    ],
    "Suppliers": [
        (1, "Exotic Liquids", "Charlotte Cooper", "London", "UK"),
        (2, "Refrescos Americanas LTDA", "Carlos Diaz", "Sao Paulo", "Brazil"),
    ],
    "Products": [
        (1, "Chai", 1, 1, "10 boxes x 20 bags", 18.0, 39, 0, 10, "0"),
        (2, "Chang", 1, 1, "24 - 12 oz bottles", 19.0, 17, 40, 25, "0"),
        (3, "Aniseed Syrup", 1, 2, "12 - 550 ml bottles", 10.0, 13, 70, 25, "0"),
        (4, "Chef Anton's Gumbo Mix", 2, 2, "36 boxes", 21.35, 0, 0, 0, "1"),
        (5, "Côte de Blaye", 1, 1, "12 - 75 cl bottles", 263.5, 17, 0, 15, "0"),
        (6, "Guaraná Fantástica", 2, 1, "12 - 355 ml cans", 4.5, 20, 0, 0, "1"),
        (7, "Teatime Chocolate Biscuits", 2, 3, "10 boxes x 12 pieces", 9.2, 25, 0, 5, "0"),
    ],
    "Customers": [
        ("ALFKI", "Alfreds Futterkiste", "Maria Anders", "Berlin", None, "Germany"),
        ("ANATR", "Ana Trujillo Emparedados y helados", "Ana Trujillo", "México D.F.", None, "Mexico"),
        ("HANAR", "Hanari Carnes", "Mario Pontes", "Rio de Janeiro", "RJ", "Brazil"),
        ("PARIS", "Paris spécialités", "Marie Bertrand", "Paris", None, "France"),
    ],
    "Employees": [
        (1, "Davolio", "Nancy", "Sales Representative", 2),
        (2, "Fuller", "Andrew", "Vice President, Sales", None),
    ],
    "Orders": [
        (10248, "ALFKI", 1, "2016-07-04", "2016-07-16", 32.38, "Germany"),
        (10249, "HANAR", 2, "2016-07-05", "2016-07-10", 150.0, "Brazil"),
        (10250, "ANATR", 1, "2016-07-08", None, 120.5, "Mexico"),
    ],
    "Order Details": [
        (10248, 1, 18.0, 12, 0.0),
        (10248, 3, 10.0, 10, 0.0),
        (10249, 5, 263.5, 9, 0.0),
        (10249, 6, 4.5, 40, 0.05),
        (10250, 7, 9.2, 35, 0.15),
    ],
}


def build_sample_db(path: Path) -> Path:
    """Create a small Northwind-shaped database for tests."""
    with sqlite3.connect(path) as conn:
        conn.executescript(SCHEMA)
        for table, rows in ROWS.items():
            placeholders = ", ".join("?" for _ in rows[0])
            conn.executemany(f'INSERT INTO "{table}" VALUES ({placeholders})', rows)
        conn.commit()
    conn.close()
    return path


@pytest.fixture()
def sample_db(tmp_path, monkeypatch):
    db_path = build_sample_db(tmp_path / "northwind.db")
    monkeypatch.setattr(db_init, "DATA_DIR", tmp_path)
    monkeypatch.setattr(db_init, "DB_PATH", db_path)
    monkeypatch.setattr(database, "DB_PATH", db_path)
    database.close_session_conn()
    yield db_path
    database.close_session_conn()


@pytest.fixture()
def conn(sample_db):
    connection = sqlite3.connect(sample_db)
    yield connection
    connection.close()
