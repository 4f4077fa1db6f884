# Database models

# SQL схемы для создания таблиц базы данных.
# Бронирования и отзывы ссылаются на автомобиль только по ID,
# поэтому удаление автомобиля не затрагивает историю.

CREATE_USERS_TABLE = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT UNIQUE NOT NULL,
    role TEXT NOT NULL CHECK (role IN ('client', 'owner')),
    avatar TEXT,
    balance REAL NOT NULL DEFAULT 0,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);
"""

CREATE_CARS_TABLE = """
CREATE TABLE IF NOT EXISTS cars (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    owner_id INTEGER NOT NULL,
    rental_type TEXT NOT NULL DEFAULT 'marketplace',
    category TEXT NOT NULL,
    brand TEXT NOT NULL,
    model TEXT NOT NULL,
    year INTEGER NOT NULL,
    price_per_day INTEGER NOT NULL CHECK (price_per_day > 0),
    city TEXT NOT NULL,
    description TEXT NOT NULL DEFAULT '',
    images TEXT NOT NULL DEFAULT '[]',
    available BOOLEAN NOT NULL DEFAULT 1,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (owner_id) REFERENCES users(id)
);
"""

CREATE_BOOKINGS_TABLE = """
CREATE TABLE IF NOT EXISTS bookings (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    car_id INTEGER NOT NULL,
    client_id INTEGER NOT NULL,
    owner_id INTEGER NOT NULL,
    start_date DATE NOT NULL,
    end_date DATE NOT NULL,
    total_price INTEGER NOT NULL,
    status TEXT NOT NULL DEFAULT 'pending',
    created_at TEXT NOT NULL,
    FOREIGN KEY (client_id) REFERENCES users(id),
    FOREIGN KEY (owner_id) REFERENCES users(id),
    CHECK (end_date >= start_date)
);
"""

CREATE_REVIEWS_TABLE = """
CREATE TABLE IF NOT EXISTS reviews (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    car_id INTEGER NOT NULL,
    user_id INTEGER NOT NULL,
    user_name TEXT NOT NULL,
    rating INTEGER NOT NULL CHECK (rating BETWEEN 1 AND 5),
    comment TEXT NOT NULL DEFAULT '',
    date DATE NOT NULL,
    FOREIGN KEY (user_id) REFERENCES users(id)
);
"""

CREATE_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_users_email ON users(email)",
    "CREATE INDEX IF NOT EXISTS idx_cars_owner_id ON cars(owner_id)",
    "CREATE INDEX IF NOT EXISTS idx_cars_category ON cars(category)",
    "CREATE INDEX IF NOT EXISTS idx_bookings_car_id ON bookings(car_id)",
    "CREATE INDEX IF NOT EXISTS idx_bookings_client_id ON bookings(client_id)",
    "CREATE INDEX IF NOT EXISTS idx_bookings_owner_id ON bookings(owner_id)",
    "CREATE INDEX IF NOT EXISTS idx_reviews_car_id ON reviews(car_id)",
]

# Все таблицы для создания
ALL_TABLES = [
    CREATE_USERS_TABLE,
    CREATE_CARS_TABLE,
    CREATE_BOOKINGS_TABLE,
    CREATE_REVIEWS_TABLE,
]
