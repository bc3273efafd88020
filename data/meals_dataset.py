SEED_MEALS = [
    {"name": "Kottbullar med potatismos", "category": "meat", "last_cooked": "2026-01-02", "times_cooked": 15},
    {"name": "Pannbiff med loksas", "category": "meat", "last_cooked": "2026-01-19", "times_cooked": 8},
    {"name": "Falukorv i ugn", "category": "meat", "last_cooked": "2026-01-11", "times_cooked": 12},
    {"name": "Raggmunk med flask", "category": "meat", "last_cooked": "2025-12-21", "times_cooked": 6},
    {"name": "Ugnsbakad lax med potatis", "category": "fish", "last_cooked": "2026-01-27", "times_cooked": 10},
    {"name": "Fiskgratang", "category": "fish", "last_cooked": "2026-02-03", "times_cooked": 5},
    {"name": "Artsoppa och pannkakor", "category": "meat", "last_cooked": "2026-01-30", "times_cooked": 4},
    {"name": "Vegetarisk pytt i panna", "category": "vegetarian", "last_cooked": "2026-01-24", "times_cooked": 7},
    {"name": "Kikartsgryta med ris", "category": "vegetarian", "last_cooked": "2026-01-08", "times_cooked": 9},
    {"name": "Rotfruktssoppa med brod", "category": "vegetarian", "last_cooked": "2025-12-28", "times_cooked": 11},
]
