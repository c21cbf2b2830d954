"""
Built-in task types and their example payloads.

BUILTIN_TASK_TYPES is what scripts/seed_task_types.py upserts into
task_type_registry.  EXAMPLE_PAYLOADS is served by
GET /api/schemas/{task_type} so an agent can see a passing payload.
"""

from __future__ import annotations

from typing import Any

_SCHEDULE = {
    "title": {"type": "string", "min_length": 5, "max_length": 200},
    "description": {"type": "string", "min_length": 20, "max_length": 1000},
}

_PRIVATE = ["private_address", "private_notes", "private_contact"]


BUILTIN_TASK_TYPES: list[dict[str, Any]] = [
    {
        "id": "cleaning",
        "display_name": "Cleaning",
        "description": "Home or office cleaning",
        "category": "home_services",
        "required_fields": [
            "title", "description", "datetime_start", "duration_hours", "budget_usd", "location_zone",
        ],
        "optional_fields": ["skills_required", "requirements", *_PRIVATE],
        "field_schemas": {
            **_SCHEDULE,
            "duration_hours": {"type": "number", "min": 1, "max": 12},
            "budget_usd": {"type": "number", "min": 15},
            "skills_required": {
                "type": "array",
                "allowed_values": [
                    "standard_clean", "deep_clean", "move_out_clean",
                    "laundry", "dishes", "windows", "organizing",
                ],
            },
        },
        "minimum_budget_usd": 15,
        "maximum_duration_hr": 12,
        "prohibited_keywords": [],
        "requires_address": True,
    },
    {
        "id": "delivery",
        "display_name": "Delivery",
        "description": "Pick up and drop off items locally",
        "category": "logistics",
        "required_fields": ["title", "description", "datetime_start", "budget_usd", "location_zone"],
        "optional_fields": ["duration_hours", "requirements", *_PRIVATE],
        "field_schemas": {
            **_SCHEDULE,
            "duration_hours": {"type": "number", "min": 0.5, "max": 8},
            "budget_usd": {"type": "number", "min": 10},
        },
        "minimum_budget_usd": 10,
        "maximum_duration_hr": 8,
        "prohibited_keywords": [],
        "requires_address": True,
    },
    {
        "id": "handyman",
        "display_name": "Handyman",
        "description": "Small repairs and installations",
        "category": "home_services",
        "required_fields": [
            "title", "description", "datetime_start", "duration_hours", "budget_usd", "location_zone",
        ],
        "optional_fields": ["skills_required", "requirements", *_PRIVATE],
        "field_schemas": {
            **_SCHEDULE,
            "duration_hours": {"type": "number", "min": 1, "max": 10},
            "budget_usd": {"type": "number", "min": 20},
            "skills_required": {
                "type": "array",
                "allowed_values": [
                    "plumbing", "electrical", "carpentry", "painting",
                    "furniture_assembly", "mounting", "general_repair",
                ],
            },
        },
        "minimum_budget_usd": 20,
        "maximum_duration_hr": 10,
        "prohibited_keywords": [],
        "requires_address": True,
    },
    {
        "id": "photography",
        "display_name": "Photography",
        "description": "Photo shoots and product photography",
        "category": "creative",
        "required_fields": [
            "title", "description", "datetime_start", "duration_hours", "budget_usd", "location_zone",
        ],
        "optional_fields": ["skills_required", "requirements", *_PRIVATE],
        "field_schemas": {
            **_SCHEDULE,
            "duration_hours": {"type": "number", "min": 1, "max": 10},
            "budget_usd": {"type": "number", "min": 30},
            "skills_required": {
                "type": "array",
                "allowed_values": ["product", "portrait", "event", "real_estate", "food"],
            },
        },
        "minimum_budget_usd": 30,
        "maximum_duration_hr": 10,
        "prohibited_keywords": [],
        "requires_address": False,
    },
    {
        "id": "personal_assistant",
        "display_name": "Personal Assistant",
        "description": "Research, scheduling and admin work",
        "category": "professional",
        "required_fields": ["title", "description", "datetime_start", "duration_hours", "budget_usd"],
        "optional_fields": ["location_zone", "skills_required", "requirements", *_PRIVATE],
        "field_schemas": {
            **_SCHEDULE,
            "duration_hours": {"type": "number", "min": 1, "max": 8},
            "budget_usd": {"type": "number", "min": 15},
            "skills_required": {
                "type": "array",
                "allowed_values": ["research", "scheduling", "data_entry", "translation", "writing"],
            },
        },
        "minimum_budget_usd": 15,
        "maximum_duration_hr": 8,
        "prohibited_keywords": [],
        "requires_address": False,
    },
    {
        "id": "errands",
        "display_name": "Errands",
        "description": "Queues, drop-offs and small in-person errands",
        "category": "logistics",
        "required_fields": ["title", "description", "datetime_start", "budget_usd", "location_zone"],
        "optional_fields": ["duration_hours", "requirements", *_PRIVATE],
        "field_schemas": {
            **_SCHEDULE,
            "duration_hours": {"type": "number", "min": 0.5, "max": 6},
            "budget_usd": {"type": "number", "min": 8},
        },
        "minimum_budget_usd": 8,
        "maximum_duration_hr": 6,
        "prohibited_keywords": [],
        "requires_address": False,
    },
    {
        "id": "tech_setup",
        "display_name": "Tech Setup",
        "description": "Device, network and software setup",
        "category": "professional",
        "required_fields": ["title", "description", "datetime_start", "duration_hours", "budget_usd"],
        "optional_fields": ["location_zone", "skills_required", "requirements", *_PRIVATE],
        "field_schemas": {
            **_SCHEDULE,
            "duration_hours": {"type": "number", "min": 1, "max": 8},
            "budget_usd": {"type": "number", "min": 20},
            "skills_required": {
                "type": "array",
                "allowed_values": ["network", "computer", "smart_home", "printer", "phone"],
            },
        },
        "minimum_budget_usd": 20,
        "maximum_duration_hr": 8,
        "prohibited_keywords": [],
        "requires_address": False,
    },
]


EXAMPLE_PAYLOADS: dict[str, dict[str, Any]] = {
    "cleaning": {
        "task_type": "cleaning",
        "title": "2BR Apartment Standard Clean",
        "description": "Standard cleaning for a 2-bedroom apartment. Kitchen, bathrooms, living areas, "
                       "and bedrooms need vacuuming, mopping, and surface wiping.",
        "location_zone": "District 2, Thu Duc",
        "location_lat": 10.787,
        "location_lng": 106.751,
        "datetime_start": "2025-03-15T14:00:00Z",
        "duration_hours": 2,
        "budget_usd": 35,
        "skills_required": ["standard_clean"],
        "requirements": ["supplies_provided"],
        "private_address": "123 Nguyen Hue, Apartment 4B, District 2",
        "private_notes": "Gate code is 4521. Ring doorbell twice.",
    },
    "delivery": {
        "task_type": "delivery",
        "title": "Grocery Pickup and Delivery",
        "description": "Pick up a grocery order from the local supermarket and deliver it to my location. "
                       "Approximately 5 bags of groceries.",
        "location_zone": "Binh Thanh District",
        "datetime_start": "2025-03-15T10:00:00Z",
        "budget_usd": 15,
        "private_address": "456 Le Van Sy, Ward 14, Binh Thanh",
    },
    "handyman": {
        "task_type": "handyman",
        "title": "Fix Leaking Kitchen Faucet",
        "description": "The kitchen faucet has been slowly leaking for a few days. Needs inspection and "
                       "repair or replacement of the cartridge/washer.",
        "location_zone": "District 7, Ho Chi Minh City",
        "datetime_start": "2025-03-16T09:00:00Z",
        "duration_hours": 2,
        "budget_usd": 40,
        "skills_required": ["plumbing"],
        "private_address": "789 Phu My Hung, D7",
    },
    "photography": {
        "task_type": "photography",
        "title": "Product Photography Session - 20 Items",
        "description": "Need professional product photography for 20 items for an e-commerce store. "
                       "White background, multiple angles per item.",
        "location_zone": "District 1, Ho Chi Minh City",
        "datetime_start": "2025-03-20T09:00:00Z",
        "duration_hours": 4,
        "budget_usd": 120,
        "skills_required": ["product"],
        "requirements": ["own_equipment", "editing_included"],
    },
    "personal_assistant": {
        "task_type": "personal_assistant",
        "title": "Research and Compile Local Vendor List",
        "description": "Research and compile a list of 20 local vendors for office supplies, catering, "
                       "and cleaning services with contact info and pricing.",
        "datetime_start": "2025-03-15T08:00:00Z",
        "duration_hours": 4,
        "budget_usd": 40,
        "skills_required": ["research"],
    },
    "errands": {
        "task_type": "errands",
        "title": "Return Package to Post Office",
        "description": "Need someone to take a pre-labeled package to the nearest post office and get "
                       "a receipt. Package weighs about 2kg.",
        "location_zone": "District 3, Ho Chi Minh City",
        "datetime_start": "2025-03-15T11:00:00Z",
        "budget_usd": 12,
        "private_address": "100 Vo Van Tan, Ward 6, District 3",
    },
    "tech_setup": {
        "task_type": "tech_setup",
        "title": "Set Up Home Wi-Fi Network",
        "description": "Need help setting up a new Wi-Fi router, configuring the network, and "
                       "connecting 5 devices. Router already purchased.",
        "datetime_start": "2025-03-17T14:00:00Z",
        "duration_hours": 2,
        "budget_usd": 40,
        "skills_required": ["network"],
        "private_address": "55 Nguyen Trai, District 1",
    },
}
