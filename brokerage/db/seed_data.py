"""Sample Lagos listings loaded by `brokerage seed-properties`."""

_UNSPLASH = "https://images.unsplash.com/{}?fit=max&q=80&w=1080"

SAMPLE_PROPERTIES = [
    {
        "title": "Modern Luxury Villa",
        "location": "Lekki Phase 1, Lagos",
        "price": "₦85,000,000",
        "type": "Sale",
        "description": (
            "Stunning modern villa with premium finishes, spacious living areas, and a "
            "beautiful garden. Contemporary architecture and smart home technology throughout."
        ),
        "bedrooms": 5,
        "bathrooms": 4,
        "area": "450 sqm",
        "images": [
            _UNSPLASH.format("photo-1638369022547-1c763b1b9b3b"),
            _UNSPLASH.format("photo-1613490493576-7fde63acd811"),
        ],
        "videos": [],
        "features": [
            "Swimming Pool", "Garden", "Smart Home System", "Security System",
            "Parking for 3 Cars", "Generator", "Solar Panels", "Gym",
        ],
    },
    {
        "title": "Luxury Apartment",
        "location": "Victoria Island, Lagos",
        "price": "₦3,500,000/yr",
        "type": "Rent",
        "description": (
            "Elegant 3-bedroom apartment in the heart of Victoria Island with modern "
            "amenities, city views, and access to premium facilities."
        ),
        "bedrooms": 3,
        "bathrooms": 3,
        "area": "200 sqm",
        "images": [_UNSPLASH.format("photo-1638454668466-e8dbd5462f20")],
        "videos": [],
        "features": [
            "24/7 Security", "Elevator", "Gym", "Swimming Pool",
            "Backup Generator", "Parking", "Air Conditioning",
        ],
    },
    {
        "title": "Contemporary Villa",
        "location": "Banana Island, Lagos",
        "price": "₦150,000,000",
        "type": "Sale",
        "description": (
            "Waterfront villa on Banana Island with private beach access and "
            "world-class amenities."
        ),
        "bedrooms": 6,
        "bathrooms": 5,
        "area": "600 sqm",
        "images": [_UNSPLASH.format("photo-1622015663381-d2e05ae91b72")],
        "videos": [],
        "features": [
            "Private Beach Access", "Boat Dock", "Cinema Room", "Wine Cellar",
            "Infinity Pool", "Tennis Court", "Staff Quarters", "Smart Home Automation",
        ],
    },
    {
        "title": "Premium Penthouse",
        "location": "Ikoyi, Lagos",
        "price": "₦8,000,000/yr",
        "type": "Rent",
        "description": (
            "Penthouse with panoramic city views, luxury finishes, spacious terraces, "
            "and premium building amenities."
        ),
        "bedrooms": 4,
        "bathrooms": 4,
        "area": "350 sqm",
        "images": [_UNSPLASH.format("photo-1606723325559-ad1bffa19bde")],
        "videos": [],
        "features": [
            "Rooftop Terrace", "Smart Home System", "Concierge Service", "Private Elevator",
            "Panoramic Views", "Premium Appliances", "Wine Storage",
        ],
    },
    {
        "title": "Executive Estate Home",
        "location": "Lekki Phase 2, Lagos",
        "price": "₦120,000,000",
        "type": "Sale",
        "description": (
            "Family home in a secure gated estate with excellent shared amenities."
        ),
        "bedrooms": 5,
        "bathrooms": 5,
        "area": "500 sqm",
        "images": [_UNSPLASH.format("photo-1531971589569-0d9370cbe1e5")],
        "videos": [],
        "features": [
            "Estate Clubhouse", "Tennis Court", "Children's Playground", "24/7 Estate Security",
            "Swimming Pool", "Landscaped Garden", "BQ Included",
        ],
    },
    {
        "title": "Commercial Office Building",
        "location": "Marina, Lagos",
        "price": "₦250,000,000",
        "type": "Sale",
        "description": (
            "Commercial property in the Lagos business district, suited to a corporate "
            "headquarters or investment."
        ),
        "bedrooms": 0,
        "bathrooms": 10,
        "area": "2000 sqm",
        "images": [_UNSPLASH.format("photo-1694702740570-0a31ee1525c7")],
        "videos": [],
        "features": [
            "Central Location", "Ample Parking", "Backup Power", "High-Speed Elevators",
            "Modern HVAC", "Security Systems", "Fiber Internet Ready", "Conference Facilities",
        ],
    },
]
