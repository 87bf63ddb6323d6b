# museummart/seed.py
"""
Fixed sample data loaded into the store at startup.

Museum, category and product ids follow the order of the lists below
(1-based), so product entries refer to their museum and category by
position. T-Shirts and Scarves sit under Clothing (id 2); Mugs and
Postcards under Souvenirs (id 5).
"""

from decimal import Decimal
from typing import List

from .logging import get_logger
from .models import CategoryCreate, MuseumCreate, ProductCreate
from .storage import EntityKind, EntityStore


logger = get_logger(__name__)


SAMPLE_MUSEUMS: List[MuseumCreate] = [
    MuseumCreate(
        name="Louvre Museum",
        location="Paris",
        country="France",
        description="World's largest art museum",
        website="https://louvre.fr",
        image_url="https://images.unsplash.com/photo-1499856871958-5b9627545d1a",
    ),
    MuseumCreate(
        name="Museum of Modern Art (MoMA)",
        location="New York",
        country="USA",
        description="Leading museum of modern and contemporary art",
        website="https://moma.org",
        image_url="https://images.unsplash.com/photo-1566471785347-9dc2d2b0a0e5",
    ),
    MuseumCreate(
        name="British Museum",
        location="London",
        country="UK",
        description="World history and culture museum",
        website="https://britishmuseum.org",
        image_url="https://images.unsplash.com/photo-1513475382585-d06e58bcb0e0",
    ),
    MuseumCreate(
        name="Metropolitan Museum of Art",
        location="New York",
        country="USA",
        description="Comprehensive art collection",
        website="https://metmuseum.org",
        image_url="https://images.unsplash.com/photo-1518998053901-5348d3961a04",
    ),
    MuseumCreate(
        name="Smithsonian Institution",
        location="Washington DC",
        country="USA",
        description="World's largest museum complex",
        website="https://si.edu",
        image_url="https://images.unsplash.com/photo-1578662996442-48f60103fc96",
    ),
    MuseumCreate(
        name="Uffizi Gallery",
        location="Florence",
        country="Italy",
        description="Renaissance art collection",
        website="https://uffizi.it",
        image_url="https://images.unsplash.com/photo-1544716278-ca5e3f4abd8c",
    ),
]

SAMPLE_CATEGORIES: List[CategoryCreate] = [
    CategoryCreate(name="Art Prints", slug="art-prints", description="High-quality reproductions of famous artworks"),
    CategoryCreate(name="Clothing", slug="clothing", description="Museum-themed apparel and accessories"),
    CategoryCreate(name="T-Shirts", slug="t-shirts", description="Comfortable museum-themed t-shirts", parent_id=2),
    CategoryCreate(name="Scarves", slug="scarves", description="Elegant scarves with artistic designs", parent_id=2),
    CategoryCreate(name="Souvenirs", slug="souvenirs", description="Memorable keepsakes from museum visits"),
    CategoryCreate(name="Mugs", slug="mugs", description="Coffee mugs with museum artwork", parent_id=5),
    CategoryCreate(name="Postcards", slug="postcards", description="Beautiful postcards featuring museum pieces", parent_id=5),
    CategoryCreate(name="Cultural Artifacts", slug="cultural-artifacts", description="Replica artifacts and historical items"),
    CategoryCreate(name="Books", slug="books", description="Art books and museum publications"),
    CategoryCreate(name="Jewelry", slug="jewelry", description="Museum-inspired jewelry and accessories"),
    CategoryCreate(name="Home Decor", slug="home-decor", description="Decorative items for your home"),
    CategoryCreate(name="Tickets", slug="tickets", description="Museum admission and special event tickets"),
]

SAMPLE_PRODUCTS: List[ProductCreate] = [
    ProductCreate(
        name="Van Gogh Starry Night Print",
        description=(
            "High-quality canvas reproduction of Van Gogh's iconic masterpiece, "
            "printed with archival inks on premium canvas."
        ),
        short_description="Iconic Van Gogh canvas reproduction",
        price=Decimal("45.00"),
        image_url="https://images.unsplash.com/photo-1578662996442-48f60103fc96",
        museum_id=2,
        category_id=1,
        material="Canvas",
        country_of_origin="USA",
        stock_quantity=25,
        featured=True,
    ),
    ProductCreate(
        name="Egyptian Sphinx Miniature Replica",
        description=(
            "Detailed miniature replica of the Great Sphinx, handcrafted with "
            "museum-quality attention to detail."
        ),
        short_description="Handcrafted Sphinx miniature replica",
        price=Decimal("32.99"),
        image_url="https://images.unsplash.com/photo-1513475382585-d06e58bcb0e0",
        museum_id=3,
        category_id=8,
        material="Resin",
        country_of_origin="UK",
        stock_quantity=15,
        featured=True,
    ),
    ProductCreate(
        name="Mona Lisa Inspired Silk Scarf",
        description=(
            "Luxurious silk scarf featuring an elegant interpretation of the "
            "Mona Lisa, perfect for art lovers."
        ),
        short_description="Elegant Mona Lisa silk scarf",
        price=Decimal("68.00"),
        image_url="https://images.unsplash.com/photo-1544947950-fa07a98d237f",
        museum_id=1,
        category_id=4,
        material="Silk",
        country_of_origin="France",
        stock_quantity=12,
        featured=True,
    ),
    ProductCreate(
        name="Abstract Art Collection Mug",
        description="Modern coffee mug featuring abstract art designs from contemporary exhibitions.",
        short_description="Modern abstract art coffee mug",
        price=Decimal("24.95"),
        image_url="https://images.unsplash.com/photo-1506905925346-21bda4d32df4",
        museum_id=2,
        category_id=6,
        material="Ceramic",
        country_of_origin="USA",
        stock_quantity=30,
        featured=True,
    ),
    ProductCreate(
        name="Ancient Greek Amphora Replica",
        description="Museum-quality replica of an ancient Greek amphora with authentic geometric patterns.",
        short_description="Authentic Greek amphora replica",
        price=Decimal("89.00"),
        image_url="https://images.unsplash.com/photo-1518998053901-5348d3961a04",
        museum_id=4,
        category_id=8,
        material="Ceramic",
        country_of_origin="USA",
        stock_quantity=8,
        featured=True,
    ),
    ProductCreate(
        name="Da Vinci Codex Journal",
        description="Leather-bound journal featuring pages inspired by Leonardo da Vinci's notebooks.",
        short_description="Da Vinci inspired leather journal",
        price=Decimal("28.50"),
        image_url="https://images.unsplash.com/photo-1544716278-ca5e3f4abd8c",
        museum_id=5,
        category_id=9,
        material="Leather",
        country_of_origin="USA",
        stock_quantity=20,
        featured=True,
    ),
    ProductCreate(
        name="Museum Quality T-Shirt",
        description="Comfortable cotton t-shirt featuring iconic museum artwork in a modern design.",
        short_description="Comfortable museum artwork t-shirt",
        price=Decimal("19.99"),
        image_url="https://images.unsplash.com/photo-1521572163474-6864f9cf17ab",
        museum_id=1,
        category_id=3,
        material="Cotton",
        country_of_origin="France",
        stock_quantity=50,
        featured=False,
    ),
    ProductCreate(
        name="Renaissance Art Postcards Set",
        description="Beautiful set of 12 postcards featuring Renaissance masterpieces from the Uffizi collection.",
        short_description="Renaissance masterpieces postcard set",
        price=Decimal("12.99"),
        image_url="https://images.unsplash.com/photo-1578662996442-48f60103fc96",
        museum_id=6,
        category_id=7,
        material="Paper",
        country_of_origin="Italy",
        stock_quantity=40,
        featured=False,
    ),
]


def seed_store(store: EntityStore) -> EntityStore:
    """Load the sample museums, categories and products into ``store``."""
    for museum in SAMPLE_MUSEUMS:
        store.create(EntityKind.MUSEUM, museum)
    for category in SAMPLE_CATEGORIES:
        store.create(EntityKind.CATEGORY, category)
    for product in SAMPLE_PRODUCTS:
        store.create(EntityKind.PRODUCT, product)

    logger.info(
        "Seeded %d museums, %d categories, %d products",
        store.count(EntityKind.MUSEUM),
        store.count(EntityKind.CATEGORY),
        store.count(EntityKind.PRODUCT),
    )
    return store
