"""Lesson catalog for the introductory SQL tutorial (Northwind sample DB)."""

from typing import Dict, List

from src.sql.runner import run_query

TOPICS = ("SELECT", "WHERE", "JOIN")

LESSONS: List[Dict] = [
    {
        "id": "select-all",
        "topic": "SELECT",
        "title": "Todas as colunas de uma tabela",
        "explanation": (
            "`SELECT *` devolve todas as colunas na ordem em que foram declaradas na tabela. "
            "Em tabelas grandes use sempre `LIMIT` para olhar só uma amostra."
        ),
        "sql": "SELECT * FROM Products LIMIT 5;",
    },
    {
        "id": "select-columns",
        "topic": "SELECT",
        "title": "Escolhendo colunas",
        "explanation": (
            "Liste apenas as colunas que interessam, separadas por vírgula. "
            "O resultado segue a ordem em que você escreveu as colunas."
        ),
        "sql": "SELECT ProductName, UnitPrice FROM Products LIMIT 10;",
    },
    {
        "id": "select-order-by",
        "topic": "SELECT",
        "title": "Ordenando com ORDER BY",
        "explanation": (
            "`ORDER BY` ordena o resultado; `DESC` inverte a ordem. "
            "Combinado com `LIMIT`, responde perguntas do tipo 'os 5 mais caros'."
        ),
        "sql": "SELECT ProductName, UnitPrice FROM Products ORDER BY UnitPrice DESC LIMIT 5;",
    },
    {
        "id": "select-distinct",
        "topic": "SELECT",
        "title": "Valores únicos com DISTINCT",
        "explanation": "`DISTINCT` remove linhas repetidas do resultado.",
        "sql": "SELECT DISTINCT Country FROM Customers ORDER BY Country;",
    },
    {
        "id": "select-expressions",
        "topic": "SELECT",
        "title": "Colunas calculadas e apelidos",
        "explanation": (
            "Você pode calcular novas colunas a partir de outras e dar um nome com `AS`. "
            "O apelido pode ser usado no `ORDER BY`."
        ),
        "sql": (
            "SELECT ProductName, UnitPrice, UnitsInStock, UnitPrice * UnitsInStock AS StockValue\n"
            "FROM Products\n"
            "ORDER BY StockValue DESC\n"
            "LIMIT 5;"
        ),
    },
    {
        "id": "where-comparison",
        "topic": "WHERE",
        "title": "Filtrando com comparações",
        "explanation": (
            "`WHERE` mantém apenas as linhas em que a condição é verdadeira. "
            "Operadores comuns: `=`, `<>`, `>`, `>=`, `<`, `<=`."
        ),
        "sql": "SELECT ProductName, UnitPrice FROM Products WHERE UnitPrice > 50 ORDER BY UnitPrice DESC;",
    },
    {
        "id": "where-and-or",
        "topic": "WHERE",
        "title": "Combinando condições com AND e OR",
        "explanation": (
            "`AND` exige as duas condições, `OR` aceita qualquer uma. "
            "Use parênteses para deixar a precedência explícita."
        ),
        "sql": (
            "SELECT ProductName, UnitPrice, UnitsInStock, Discontinued\n"
            "FROM Products\n"
            "WHERE UnitPrice < 20 AND (UnitsInStock = 0 OR Discontinued = 1);"
        ),
    },
    {
        "id": "where-in",
        "topic": "WHERE",
        "title": "Listas de valores com IN",
        "explanation": "`IN (...)` é um atalho para vários `OR` sobre a mesma coluna.",
        "sql": (
            "SELECT CompanyName, City, Country\n"
            "FROM Customers\n"
            "WHERE Country IN ('Brazil', 'Argentina', 'Mexico')\n"
            "ORDER BY Country, CompanyName;"
        ),
    },
    {
        "id": "where-like",
        "topic": "WHERE",
        "title": "Padrões de texto com LIKE",
        "explanation": (
            "`%` casa qualquer sequência de caracteres e `_` casa exatamente um. "
            "No SQLite, `LIKE` não diferencia maiúsculas de minúsculas para letras ASCII."
        ),
        "sql": "SELECT ProductName FROM Products WHERE ProductName LIKE 'Ch%' ORDER BY ProductName;",
    },
    {
        "id": "where-between",
        "topic": "WHERE",
        "title": "Intervalos com BETWEEN",
        "explanation": "`BETWEEN a AND b` inclui os dois extremos.",
        "sql": "SELECT OrderID, OrderDate, Freight FROM Orders WHERE Freight BETWEEN 100 AND 200 ORDER BY Freight;",
    },
    {
        "id": "where-null",
        "topic": "WHERE",
        "title": "Valores ausentes com IS NULL",
        "explanation": (
            "`NULL` não é igual a nada, nem a ele mesmo: `Region = NULL` nunca é verdadeiro. "
            "Use `IS NULL` ou `IS NOT NULL`."
        ),
        "sql": "SELECT CompanyName, City, Region FROM Customers WHERE Region IS NULL ORDER BY CompanyName LIMIT 10;",
    },
    {
        "id": "join-inner",
        "topic": "JOIN",
        "title": "INNER JOIN entre duas tabelas",
        "explanation": (
            "Um `JOIN` combina linhas de duas tabelas pela condição do `ON`, "
            "normalmente chave estrangeira = chave primária. "
            "Apelidos curtos (`p`, `c`) deixam a consulta legível."
        ),
        "sql": (
            "SELECT p.ProductName, c.CategoryName\n"
            "FROM Products AS p\n"
            "INNER JOIN Categories AS c ON c.CategoryID = p.CategoryID\n"
            "ORDER BY c.CategoryName, p.ProductName\n"
            "LIMIT 10;"
        ),
    },
    {
        "id": "join-multi",
        "topic": "JOIN",
        "title": "Encadeando vários JOINs",
        "explanation": (
            "Cada `JOIN` adiciona uma tabela ao resultado. Aqui seguimos o caminho "
            "pedido → cliente → itens do pedido → produto. "
            "Nomes com espaço, como `Order Details`, vão entre aspas duplas."
        ),
        "sql": (
            "SELECT o.OrderID, cu.CompanyName, p.ProductName, od.Quantity\n"
            "FROM Orders AS o\n"
            "JOIN Customers AS cu ON cu.CustomerID = o.CustomerID\n"
            "JOIN \"Order Details\" AS od ON od.OrderID = o.OrderID\n"
            "JOIN Products AS p ON p.ProductID = od.ProductID\n"
            "ORDER BY o.OrderID, p.ProductName\n"
            "LIMIT 10;"
        ),
    },
    {
        "id": "join-left",
        "topic": "JOIN",
        "title": "LEFT JOIN para achar o que falta",
        "explanation": (
            "`LEFT JOIN` mantém todas as linhas da tabela da esquerda, preenchendo com `NULL` "
            "quando não há correspondência. Filtrar por `IS NULL` revela clientes sem pedidos."
        ),
        "sql": (
            "SELECT cu.CompanyName, o.OrderID\n"
            "FROM Customers AS cu\n"
            "LEFT JOIN Orders AS o ON o.CustomerID = cu.CustomerID\n"
            "WHERE o.OrderID IS NULL\n"
            "ORDER BY cu.CompanyName;"
        ),
    },
    {
        "id": "join-aggregate",
        "topic": "JOIN",
        "title": "Agregando depois do JOIN",
        "explanation": (
            "`GROUP BY` agrupa as linhas combinadas e funções como `COUNT` e `AVG` "
            "resumem cada grupo."
        ),
        "sql": (
            "SELECT c.CategoryName, COUNT(p.ProductID) AS ProductCount, ROUND(AVG(p.UnitPrice), 2) AS AvgPrice\n"
            "FROM Categories AS c\n"
            "JOIN Products AS p ON p.CategoryID = c.CategoryID\n"
            "GROUP BY c.CategoryName\n"
            "ORDER BY ProductCount DESC, c.CategoryName;"
        ),
    },
    {
        "id": "join-filter",
        "topic": "JOIN",
        "title": "JOIN com filtro",
        "explanation": "`WHERE` continua funcionando normalmente sobre o resultado do `JOIN`.",
        "sql": (
            "SELECT s.CompanyName AS Supplier, s.Country, p.ProductName\n"
            "FROM Suppliers AS s\n"
            "JOIN Products AS p ON p.SupplierID = s.SupplierID\n"
            "WHERE s.Country = 'Brazil'\n"
            "ORDER BY p.ProductName;"
        ),
    },
]

_BY_ID = {lesson["id"]: lesson for lesson in LESSONS}


def get_lesson(lesson_id: str) -> Dict:
    if lesson_id not in _BY_ID:
        raise KeyError(f"Lição '{lesson_id}' não encontrada.")
    return _BY_ID[lesson_id]


def lessons_by_topic(topic: str) -> List[Dict]:
    """Return lessons of a topic (SELECT, WHERE or JOIN), in catalog order."""
    topic_u = (topic or "").strip().upper()
    if topic_u not in TOPICS:
        raise ValueError(f"Tópico inválido: {topic!r}. Use um de {', '.join(TOPICS)}.")
    return [lesson for lesson in LESSONS if lesson["topic"] == topic_u]


def run_lesson(lesson_id: str, conn=None, show: bool = True):
    """Print the lesson prose and run its query."""
    lesson = get_lesson(lesson_id)
    if show:
        print(f"📘 {lesson['title']}")
        print(lesson["explanation"])
        print()
        print(lesson["sql"])
        print()
    return run_query(lesson["sql"], conn=conn, show=show)


__all__ = ["LESSONS", "TOPICS", "get_lesson", "lessons_by_topic", "run_lesson"]
