"""Hardcoded page content standing in for a backend feed."""

NAVIGATION = [
    {"key": "navigation.home", "href": "/"},
    {"key": "navigation.liveTracking", "href": "/tracking"},
    {"key": "navigation.routeSearch", "href": "/routes"},
    {"key": "navigation.nextBusAlert", "href": "/alerts"},
    {"key": "navigation.adminDashboard", "href": "/admin"},
    {"key": "navigation.aboutUs", "href": "/about"},
    {"key": "navigation.faq", "href": "/faq"},
    {"key": "navigation.contact", "href": "/contact"},
    {"key": "navigation.updates", "href": "/updates"},
]

HOME_FEATURES = [
    ("liveTracking", "/tracking"),
    ("routeSearch", "/routes"),
    ("smartAlerts", "/alerts"),
    ("accurateETAs", "/routes"),
]

SERVICE_ALERTS = [
    {
        "id": 1,
        "title": "Route 4 Temporarily Suspended",
        "description": "Route 4 (Residential Area - Office Complex) is temporarily suspended due to road "
        "construction. Expected to resume by 5:00 PM today.",
        "type": "warning",
        "priority": "high",
        "timestamp": "2 hours ago",
        "affectedRoutes": ["Route 4"],
        "status": "active",
    },
    {
        "id": 2,
        "title": "Delays on Route 1",
        "description": "Heavy traffic on Central Market - Tech Park route causing 15-20 minute delays. "
        "Please plan accordingly.",
        "type": "info",
        "priority": "medium",
        "timestamp": "1 hour ago",
        "affectedRoutes": ["Route 1"],
        "status": "active",
    },
    {
        "id": 3,
        "title": "New Bus Added to Route 3",
        "description": "An additional bus has been added to Route 3 (University - Mall) to improve frequency "
        "during peak hours.",
        "type": "success",
        "priority": "low",
        "timestamp": "3 hours ago",
        "affectedRoutes": ["Route 3"],
        "status": "active",
    },
    {
        "id": 4,
        "title": "Fare Update Effective Tomorrow",
        "description": "New fare structure will be effective from tomorrow. Route 1: ₹25, Route 2: ₹35, "
        "Route 3: ₹20, Route 4: ₹30.",
        "type": "info",
        "priority": "medium",
        "timestamp": "5 hours ago",
        "affectedRoutes": ["All Routes"],
        "status": "active",
    },
    {
        "id": 5,
        "title": "Route 2 Maintenance Complete",
        "description": "Scheduled maintenance on Route 2 buses has been completed. All buses are now operational.",
        "type": "success",
        "priority": "low",
        "timestamp": "1 day ago",
        "affectedRoutes": ["Route 2"],
        "status": "resolved",
    },
    {
        "id": 6,
        "title": "Weather Advisory",
        "description": "Heavy rain expected in the evening. Bus services may experience delays. "
        "Please check for updates.",
        "type": "warning",
        "priority": "medium",
        "timestamp": "2 days ago",
        "affectedRoutes": ["All Routes"],
        "status": "resolved",
    },
]

FLEET = [
    {
        "id": "bus-1", "number": "DL-01-B-1001", "driver": "Rajesh Kumar", "route": "Route 1",
        "status": "active", "passengers": 24, "capacity": 50, "fuelLevel": 85, "speed": 25, "delay": 0,
        "revenue": 1250, "tripsToday": 8, "lastMaintenance": "2024-01-15", "mileage": 45230,
    },
    {
        "id": "bus-2", "number": "DL-01-B-1002", "driver": "Priya Sharma", "route": "Route 1",
        "status": "active", "passengers": 38, "capacity": 50, "fuelLevel": 72, "speed": 20, "delay": 5,
        "revenue": 1890, "tripsToday": 7, "lastMaintenance": "2024-01-20", "mileage": 38950,
    },
    {
        "id": "bus-3", "number": "DL-01-B-1003", "driver": "Amit Singh", "route": "Route 2",
        "status": "active", "passengers": 12, "capacity": 50, "fuelLevel": 95, "speed": 30, "delay": 0,
        "revenue": 980, "tripsToday": 6, "lastMaintenance": "2024-01-10", "mileage": 52100,
    },
    {
        "id": "bus-4", "number": "DL-01-B-1004", "driver": "Sunita Patel", "route": "Route 3",
        "status": "maintenance", "passengers": 0, "capacity": 50, "fuelLevel": 45, "speed": 0, "delay": 0,
        "revenue": 0, "tripsToday": 0, "lastMaintenance": "2024-01-25", "mileage": 41800,
    },
]

ABOUT = {
    "stats": [
        {"label": "Years of Service", "value": "15+"},
        {"label": "Active Routes", "value": "4"},
        {"label": "Fleet Size", "value": "11"},
        {"label": "Daily Passengers", "value": "2,500+"},
    ],
    "story": [
        "City Transport Services was founded in 2009 with a simple mission: to provide reliable, affordable, "
        "and efficient public transportation to our community. What started as a small fleet of 3 buses has "
        "grown into a comprehensive transportation network serving thousands of passengers daily.",
        "Over the years, we have continuously invested in modernizing our fleet, improving our routes, and "
        "enhancing the passenger experience. Our commitment to safety, punctuality, and customer service has "
        "made us the preferred choice for commuters across the city.",
        "Today, we operate 4 major routes with 11 buses, connecting key areas including business districts, "
        "residential areas, educational institutions, and transportation hubs.",
    ],
    "mission": {
        "statement": "To provide safe, reliable, and accessible public transportation that connects communities "
        "and enhances the quality of life for all residents.",
        "goals": [
            "Ensuring 99% on-time performance",
            "Maintaining zero-tolerance safety policy",
            "Providing affordable fares for all",
            "Supporting environmental sustainability",
        ],
    },
    "values": [
        {"title": "Reliability", "description": "We ensure punctual and dependable bus services for all our passengers."},
        {"title": "Safety", "description": "Your safety is our top priority with well-maintained vehicles and trained drivers."},
        {"title": "Accessibility", "description": "Making public transportation accessible to everyone in our community."},
        {"title": "Innovation", "description": "Continuously improving our services with modern technology and better routes."},
    ],
    "team": [
        {"name": "Rajesh Kumar", "position": "Managing Director", "experience": "20 years"},
        {"name": "Priya Sharma", "position": "Operations Manager", "experience": "12 years"},
        {"name": "Amit Singh", "position": "Fleet Manager", "experience": "8 years"},
        {"name": "Sunita Patel", "position": "Customer Service Head", "experience": "6 years"},
    ],
}

CONTACT_INFO = [
    {
        "title": "Phone",
        "details": ["+91 11 2345 6789", "+91 11 9999 8888 (Emergency)"],
        "description": "Call us during office hours for immediate assistance",
    },
    {
        "title": "Email",
        "details": ["info@citytransport.com", "support@citytransport.com"],
        "description": "Send us an email and we'll respond within 24 hours",
    },
    {
        "title": "Office Address",
        "details": ["123 Transport Avenue", "Central Business District", "Delhi - 110001"],
        "description": "Visit our main office for in-person assistance",
    },
    {
        "title": "Office Hours",
        "details": ["Monday - Friday: 8:00 AM - 6:00 PM", "Saturday: 9:00 AM - 4:00 PM", "Sunday: Closed"],
        "description": "Emergency support available 24/7",
    },
]

INQUIRY_TYPES = ["general", "support", "feedback", "partnership"]

FAQ = [
    {
        "id": "general",
        "title": "General Information",
        "questions": [
            {"id": 1, "question": "What are your operating hours?",
             "answer": "Our buses operate from 6:00 AM to 10:00 PM on weekdays and 7:00 AM to 9:00 PM on weekends. "
             "Some routes may have extended hours during peak seasons."},
            {"id": 2, "question": "How many routes do you operate?",
             "answer": "We currently operate 4 main routes covering key areas of the city: Route 1 (Central Market - "
             "Tech Park), Route 2 (Metro Station - Airport), Route 3 (University - Mall), and Route 4 (Residential "
             "Area - Office Complex)."},
            {"id": 3, "question": "What is your fleet size?",
             "answer": "We have a fleet of 11 buses serving our 4 routes. Each route typically has 2-4 buses "
             "depending on demand and frequency requirements."},
        ],
    },
    {
        "id": "fares",
        "title": "Fares & Payment",
        "questions": [
            {"id": 4, "question": "What are the current fare rates?",
             "answer": "Our current fare structure is: Route 1 (Central Market - Tech Park): ₹25, Route 2 (Metro "
             "Station - Airport): ₹35, Route 3 (University - Mall): ₹20, Route 4 (Residential Area - Office "
             "Complex): ₹30."},
            {"id": 5, "question": "Do you offer monthly passes?",
             "answer": "Yes, we offer monthly passes at discounted rates. Route-specific monthly passes are "
             "available at 20% discount, and an all-route pass is available at 30% discount."},
            {"id": 6, "question": "What payment methods do you accept?",
             "answer": "We accept cash payments on board, digital payments through UPI, and monthly pass "
             "subscriptions. We're working on implementing contactless card payments soon."},
        ],
    },
    {
        "id": "routes",
        "title": "Routes & Schedules",
        "questions": [
            {"id": 7, "question": "How often do buses run?",
             "answer": "Bus frequency varies by route: Route 1 runs every 15 minutes, Route 2 every 20 minutes, "
             "Route 3 every 10 minutes, and Route 4 every 25 minutes during peak hours."},
            {"id": 8, "question": "Can I track my bus in real-time?",
             "answer": "Yes, you can track buses in real-time through our website's tracking page. We provide live "
             "updates on bus locations, delays, and estimated arrival times."},
            {"id": 9, "question": "What if my bus is delayed?",
             "answer": "We provide real-time alerts for delays through our website and mobile notifications. If a "
             "bus is delayed by more than 15 minutes, we'll send notifications to subscribed passengers."},
        ],
    },
    {
        "id": "safety",
        "title": "Safety & Security",
        "questions": [
            {"id": 10, "question": "What safety measures do you have in place?",
             "answer": "All our buses are equipped with GPS tracking, CCTV cameras, emergency buttons, and first aid "
             "kits. Our drivers are trained in safety protocols and passenger assistance."},
            {"id": 11, "question": "How do I report a safety concern?",
             "answer": "You can report safety concerns through our website contact form, call our emergency hotline "
             "at +91 11 9999 8888, or speak directly to the driver or conductor."},
            {"id": 12, "question": "Are your buses wheelchair accessible?",
             "answer": "Currently, 3 out of our 11 buses are wheelchair accessible. We're working to make our entire "
             "fleet accessible within the next year."},
        ],
    },
    {
        "id": "support",
        "title": "Customer Support",
        "questions": [
            {"id": 13, "question": "How can I contact customer support?",
             "answer": "You can reach us at +91 11 2345 6789 during office hours (8 AM - 6 PM, Monday-Friday), email "
             "us at support@citytransport.com, or visit our office at 123 Transport Avenue."},
            {"id": 14, "question": "Do you have a mobile app?",
             "answer": "We're currently developing a mobile app that will be available for both iOS and Android. The "
             "app will include real-time tracking, ticket booking, and route planning features."},
            {"id": 15, "question": "How do I file a complaint?",
             "answer": "You can file complaints through our website contact form, email us at "
             "complaints@citytransport.com, or call our customer service number. We aim to respond to all "
             "complaints within 24 hours."},
        ],
    },
]

CHANGELOG = [
    {
        "id": 1, "title": "Real-Time GPS Tracking Now Live", "date": "2024-01-28", "type": "feature",
        "category": "Major Release",
        "description": "We're excited to announce that real-time GPS tracking is now fully operational across all "
        "bus routes. Track your bus with pinpoint accuracy and get precise ETAs.",
        "highlights": [
            "Live GPS tracking for all buses", "Accurate ETA calculations",
            "Interactive map with bus locations", "10-second update intervals",
        ],
        "image": "/gps-tracking-interface-on-mobile-device.jpg",
    },
    {
        "id": 2, "title": "Mobile App Performance Improvements", "date": "2024-01-25", "type": "improvement",
        "category": "Performance",
        "description": "Significant performance optimizations have been implemented to make the app faster and more "
        "responsive, especially on slower internet connections.",
        "highlights": [
            "50% faster page load times", "Improved offline caching",
            "Better performance on 3G networks", "Reduced data usage by 30%",
        ],
    },
    {
        "id": 3, "title": "New Route Added: Airport Express", "date": "2024-01-22", "type": "feature",
        "category": "Route Expansion",
        "description": "Introducing the new Airport Express route connecting downtown to the airport with limited "
        "stops for faster travel times.",
        "highlights": [
            "Direct airport connection", "Express service with limited stops",
            "30-minute travel time", "Operates 5 AM to 11 PM daily",
        ],
        "image": "/modern-bus-at-airport-terminal.jpg",
    },
    {
        "id": 4, "title": "Bug Fixes and Stability Improvements", "date": "2024-01-20", "type": "bugfix",
        "category": "Maintenance",
        "description": "This update addresses several reported issues and improves overall system stability and "
        "reliability.",
        "highlights": [
            "Fixed map loading issues on Safari", "Resolved ETA calculation errors",
            "Improved error handling", "Better support for older devices",
        ],
    },
    {
        "id": 5, "title": "Dark Mode Support", "date": "2024-01-18", "type": "feature", "category": "UI/UX",
        "description": "SmartTransit now supports dark mode! Switch between light and dark themes using the toggle "
        "in the top navigation bar.",
        "highlights": [
            "Full dark mode support", "Automatic system theme detection",
            "Improved readability in low light", "Consistent theming across all pages",
        ],
        "image": "/dark-mode-interface-of-transit-app.jpg",
    },
    {
        "id": 6, "title": "Enhanced Admin Dashboard", "date": "2024-01-15", "type": "feature",
        "category": "Admin Tools",
        "description": "Transit authorities now have access to comprehensive analytics and management tools through "
        "our enhanced admin dashboard.",
        "highlights": [
            "Real-time fleet monitoring", "Performance analytics",
            "Route optimization insights", "Maintenance scheduling tools",
        ],
    },
]
