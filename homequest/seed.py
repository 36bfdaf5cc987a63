"""
Sample data for a fresh database: four agents, eight Mumbai listings and an admin account.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from homequest.repositories import AgentRepository, PropertyRepository, UserRepository
from homequest.models.property import PropertyType, PropertyCategory
from homequest.schemas import AgentCreate, PropertyCreate
from homequest.models.user import UserRole
import logging

logger = logging.getLogger(__name__)

_IMG = "https://images.unsplash.com/{}?ixlib=rb-4.0.3&auto=format&fit=crop&w={}&h={}&q=80"

SEED_AGENTS = [
    {
        "name": "Aditya Kumar",
        "email": "aditya@homequest.com",
        "phone": "9876543210",
        "specialization": "Residential Specialist",
        "experience": 5,
        "rating": 4,
        "review_count": 42,
        "image": _IMG.format("photo-1560250097-0b93528c311a", 400, 400),
        "bio": "Specializing in luxury residential properties with 5+ years of experience in the Mumbai market.",
        "areas": ["Mumbai", "Thane"],
    },
    {
        "name": "Sneha Sharma",
        "email": "sneha@homequest.com",
        "phone": "9876543211",
        "specialization": "Luxury Property Expert",
        "experience": 7,
        "rating": 5,
        "review_count": 38,
        "image": _IMG.format("photo-1573496359142-b8d87734a5a2", 400, 400),
        "bio": "Luxury property specialist with expertise in high-end residential and commercial properties.",
        "areas": ["Mumbai", "Pune"],
    },
    {
        "name": "Rajiv Verma",
        "email": "rajiv@homequest.com",
        "phone": "9876543212",
        "specialization": "Commercial Property Specialist",
        "experience": 6,
        "rating": 4,
        "review_count": 29,
        "image": _IMG.format("photo-1507003211169-0a1dd7228f2d", 400, 400),
        "bio": "Commercial property expert helping businesses find the perfect office spaces and retail locations.",
        "areas": ["Mumbai", "Hyderabad"],
    },
    {
        "name": "Neha Gupta",
        "email": "neha@homequest.com",
        "phone": "9876543213",
        "specialization": "New Projects Consultant",
        "experience": 4,
        "rating": 4,
        "review_count": 31,
        "image": _IMG.format("photo-1580489944761-15a19d654956", 400, 400),
        "bio": "Specializing in new project launches with deep knowledge of upcoming developments across cities.",
        "areas": ["Delhi", "Bangalore"],
    },
]

# `agent` is an index into SEED_AGENTS
SEED_PROPERTIES = [
    {
        "title": "Skyline Residency",
        "description": (
            "A beautiful 3BHK apartment with a stunning view of the city skyline. The apartment is well "
            "ventilated and gets ample sunlight. It has modern amenities including a swimming pool, gym, "
            "and children's play area."
        ),
        "address": "Skyline Residency, Bandra West",
        "city": "Mumbai",
        "location": "Bandra West",
        "type": PropertyType.APARTMENT,
        "category": PropertyCategory.BUY,
        "price": 12500000,
        "display_price": "₹ 1.25 Cr",
        "bedrooms": 3,
        "bathrooms": 2,
        "area": 1250,
        "amenities": ["Swimming Pool", "Gym", "Children's Play Area", "Security"],
        "features": ["Balcony", "Parking", "Power Backup"],
        "images": [_IMG.format("photo-1560448204-e02f11c3d0e2", 800, 500)],
        "latitude": "19.0596",
        "longitude": "72.8295",
        "featured": True,
        "agent": 0,
    },
    {
        "title": "Palm Paradise Villa",
        "description": (
            "Luxurious 4BHK villa with a private swimming pool and garden. The villa is designed for modern "
            "living with high-end finishes, spacious rooms, and top-notch amenities."
        ),
        "address": "Palm Paradise, Juhu",
        "city": "Mumbai",
        "location": "Juhu",
        "type": PropertyType.VILLA,
        "category": PropertyCategory.BUY,
        "price": 29500000,
        "display_price": "₹ 2.95 Cr",
        "bedrooms": 4,
        "bathrooms": 4,
        "area": 2680,
        "amenities": ["Private Pool", "Garden", "Security", "Club House"],
        "features": ["Terrace", "Parking", "Power Backup", "Furnished"],
        "images": [_IMG.format("photo-1564013799919-ab600027ffc6", 800, 500)],
        "latitude": "19.1074",
        "longitude": "72.8289",
        "featured": True,
        "agent": 1,
    },
    {
        "title": "Urban Compact Studio",
        "description": (
            "Cozy studio apartment perfect for singles or young couples. Modern design with efficient use "
            "of space and all necessary amenities for comfortable living."
        ),
        "address": "Urban Heights, Powai",
        "city": "Mumbai",
        "location": "Powai",
        "type": PropertyType.APARTMENT,
        "category": PropertyCategory.BUY,
        "price": 7550000,
        "display_price": "₹ 75.5 Lac",
        "bedrooms": 1,
        "bathrooms": 1,
        "area": 650,
        "amenities": ["Gym", "Security", "Power Backup"],
        "features": ["Modern Kitchen", "AC", "Furnished"],
        "images": [_IMG.format("photo-1505691938895-1758d7feb511", 800, 500)],
        "latitude": "19.1157",
        "longitude": "72.9063",
        "is_new_launch": True,
        "agent": 2,
    },
    {
        "title": "Business Hub Office Space",
        "description": (
            "Premium office space in a prime business district. The space is designed for optimal "
            "productivity with modern infrastructure and essential business amenities."
        ),
        "address": "Tech Park, Andheri East",
        "city": "Mumbai",
        "location": "Andheri East",
        "type": PropertyType.COMMERCIAL,
        "category": PropertyCategory.BUY,
        "price": 17500000,
        "display_price": "₹ 1.75 Cr",
        "area": 1800,
        "amenities": ["Conference Room", "Cafeteria", "24/7 Security", "Power Backup"],
        "features": ["Air Conditioning", "Parking", "Reception Area"],
        "images": [_IMG.format("photo-1604328698692-f76ea9498e76", 800, 500)],
        "latitude": "19.1136",
        "longitude": "72.8697",
        "agent": 3,
    },
    {
        "title": "Green Valley Apartment",
        "description": (
            "Spacious 2BHK apartment in a quiet neighborhood with lush greenery. Perfect for families "
            "looking for a peaceful living environment with all modern amenities."
        ),
        "address": "Green Valley, Malad West",
        "city": "Mumbai",
        "location": "Malad West",
        "type": PropertyType.APARTMENT,
        "category": PropertyCategory.RENT,
        "price": 35000,
        "display_price": "₹ 35,000/month",
        "bedrooms": 2,
        "bathrooms": 2,
        "area": 950,
        "amenities": ["Garden", "Children's Play Area", "Security"],
        "features": ["Balcony", "Parking", "Semi-Furnished"],
        "images": [_IMG.format("photo-1522708323590-d24dbb6b0267", 800, 500)],
        "latitude": "19.1857",
        "longitude": "72.8404",
        "agent": 0,
    },
    {
        "title": "Summit Heights",
        "description": (
            "Elegant 3BHK apartment with premium finishes and spectacular city views. Located in a prime "
            "residential area with excellent connectivity and amenities."
        ),
        "address": "Summit Heights, Dadar West",
        "city": "Mumbai",
        "location": "Dadar West",
        "type": PropertyType.APARTMENT,
        "category": PropertyCategory.BUY,
        "price": 18500000,
        "display_price": "₹ 1.85 Cr",
        "bedrooms": 3,
        "bathrooms": 3,
        "area": 1500,
        "amenities": ["Swimming Pool", "Gym", "Club House", "Security"],
        "features": ["Balcony", "Parking", "Power Backup", "Furnished"],
        "images": [_IMG.format("photo-1493809842364-78817add7ffb", 800, 500)],
        "latitude": "19.0228",
        "longitude": "72.8418",
        "featured": True,
        "agent": 1,
    },
    {
        "title": "Harmony Towers",
        "description": (
            "Contemporary 2BHK apartment with modern amenities. Located in a well-connected area with easy "
            "access to public transportation, schools, and shopping centers."
        ),
        "address": "Harmony Towers, Andheri West",
        "city": "Mumbai",
        "location": "Andheri West",
        "type": PropertyType.APARTMENT,
        "category": PropertyCategory.RENT,
        "price": 45000,
        "display_price": "₹ 45,000/month",
        "bedrooms": 2,
        "bathrooms": 2,
        "area": 850,
        "amenities": ["Gym", "Security", "Power Backup"],
        "features": ["Balcony", "Parking", "Furnished"],
        "images": [_IMG.format("photo-1502672260266-1c1ef2d93688", 800, 500)],
        "latitude": "19.1364",
        "longitude": "72.8296",
        "agent": 2,
    },
    {
        "title": "Sunset Boulevard Apartment",
        "description": (
            "Luxurious 3BHK apartment with panoramic sea views. Located in a premium residential complex "
            "with world-class amenities and excellent security."
        ),
        "address": "Sunset Boulevard, Worli",
        "city": "Mumbai",
        "location": "Worli",
        "type": PropertyType.APARTMENT,
        "category": PropertyCategory.BUY,
        "price": 45000000,
        "display_price": "₹ 4.5 Cr",
        "bedrooms": 3,
        "bathrooms": 3,
        "area": 2100,
        "amenities": ["Swimming Pool", "Gym", "Spa", "Club House", "Security"],
        "features": ["Sea View", "Balcony", "Parking", "Fully Furnished"],
        "images": [_IMG.format("photo-1512917774080-9991f1c4c750", 800, 500)],
        "latitude": "19.0178",
        "longitude": "72.8478",
        "is_exclusive": True,
        "agent": 3,
    },
]

SEED_ADMIN = {
    "username": "admin",
    "password": "admin123",
    "email": "admin@realestate.com",
    "name": "Administrator",
    "role": UserRole.ADMIN,
}


async def seed_database(db: AsyncSession) -> bool:
    """
    Insert the sample agents, listings and admin account into an empty database.

    Args:
        db: Database session

    Returns:
        True if data was inserted, False if agents or properties already existed
    """
    agent_repo = AgentRepository(db)
    property_repo = PropertyRepository(db)
    user_repo = UserRepository(db)

    agent_count = await agent_repo.count()
    property_count = await property_repo.count()
    if agent_count > 0 or property_count > 0:
        logger.info("Database already has data, skipping seed")
        return False

    try:
        logger.info("Seeding agents...")
        agents = await agent_repo.bulk_create(
            [AgentCreate.model_validate(agent).model_dump() for agent in SEED_AGENTS]
        )

        logger.info("Seeding properties...")
        for listing in SEED_PROPERTIES:
            data = {k: v for k, v in listing.items() if k != "agent"}
            data["agent_id"] = agents[listing["agent"]].id
            await property_repo.create_property(PropertyCreate.model_validate(data).model_dump())

        logger.info("Seeding admin user...")
        if not await user_repo.get_user_by_username(SEED_ADMIN["username"]):
            await user_repo.create_user(SEED_ADMIN)

        logger.info("Database seeded successfully")
        return True
    except Exception as e:
        logger.error(f"Error seeding database: {e}")
        raise
