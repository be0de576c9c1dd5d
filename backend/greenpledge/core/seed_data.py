"""Seed Data — demo conservation projects inserted into an empty catalog.

Invariants:
    - Exactly six projects, one per demo region
    - Every entry is a valid ProjectCreate payload (decimals as strings)
"""

_IMAGE_BASE = "https://images.unsplash.com"

SEED_PROJECTS: tuple[dict, ...] = (
    {
        "name": "Amazon Rainforest Restoration",
        "description": (
            "Restoring degraded rainforest areas in the Brazilian Amazon through "
            "native species reforestation and community engagement."
        ),
        "location": "Brazil, South America",
        "latitude": "-3.4653",
        "longitude": "-62.2159",
        "projectType": "reforestation",
        "area": "1200.50",
        "treesPlanted": "450000",
        "co2Offset": "9000.00",
        "imageUrl": f"{_IMAGE_BASE}/photo-1516026672322-bc52d61a55d5?q=80&w=800&auto=format&fit=crop",
        "status": "active",
    },
    {
        "name": "African Savanna Conservation",
        "description": (
            "Protecting and restoring savanna ecosystems in Kenya through "
            "sustainable land management and wildlife corridor preservation."
        ),
        "location": "Kenya, East Africa",
        "latitude": "-1.2921",
        "longitude": "36.8219",
        "projectType": "conservation",
        "area": "800.00",
        "treesPlanted": "180000",
        "co2Offset": "3600.00",
        "imageUrl": f"{_IMAGE_BASE}/photo-1547471080-7cc2caa01a7e?q=80&w=800&auto=format&fit=crop",
        "status": "active",
    },
    {
        "name": "Boreal Forest Protection",
        "description": (
            "Preserving ancient boreal forests in Canada and promoting "
            "sustainable forestry practices to combat climate change."
        ),
        "location": "Canada, North America",
        "latitude": "56.1304",
        "longitude": "-106.3468",
        "projectType": "conservation",
        "area": "2500.00",
        "treesPlanted": "0",
        "co2Offset": "15000.00",
        "imageUrl": f"{_IMAGE_BASE}/photo-1511497584788-876760111969?q=80&w=800&auto=format&fit=crop",
        "status": "active",
    },
    {
        "name": "Mangrove Coastal Restoration",
        "description": (
            "Restoring vital mangrove ecosystems along the coast of Indonesia "
            "to protect against erosion and support marine biodiversity."
        ),
        "location": "Indonesia, Southeast Asia",
        "latitude": "-0.7893",
        "longitude": "113.9213",
        "projectType": "restoration",
        "area": "450.00",
        "treesPlanted": "280000",
        "co2Offset": "5600.00",
        "imageUrl": f"{_IMAGE_BASE}/photo-1559827260-dc66d52bef19?q=80&w=800&auto=format&fit=crop",
        "status": "active",
    },
    {
        "name": "Urban Green Corridor Initiative",
        "description": (
            "Creating interconnected green spaces and tree corridors in urban "
            "areas of India to improve air quality and biodiversity."
        ),
        "location": "India, South Asia",
        "latitude": "20.5937",
        "longitude": "78.9629",
        "projectType": "afforestation",
        "area": "150.00",
        "treesPlanted": "95000",
        "co2Offset": "1900.00",
        "imageUrl": f"{_IMAGE_BASE}/photo-1524492412937-b28074a5d7da?q=80&w=800&auto=format&fit=crop",
        "status": "active",
    },
    {
        "name": "Mediterranean Forest Recovery",
        "description": (
            "Recovering fire-damaged Mediterranean forests in Spain through "
            "native oak and pine reforestation programs."
        ),
        "location": "Spain, Europe",
        "latitude": "40.4637",
        "longitude": "-3.7492",
        "projectType": "restoration",
        "area": "680.00",
        "treesPlanted": "320000",
        "co2Offset": "6400.00",
        "imageUrl": f"{_IMAGE_BASE}/photo-1542601906990-b4d3fb778b09?q=80&w=800&auto=format&fit=crop",
        "status": "completed",
    },
)
