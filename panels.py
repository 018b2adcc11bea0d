# panels.py
# Door id -> info panel text shown by ui.PanelOverlay.

PANELS = {
    "about": {
        "title": "ABOUT ME",
        "sections": [
            {"heading": "Welcome to my World!", "lines": [
                "Data scientist and ML engineer building production AI/ML systems.",
            ]},
            {"heading": "Current Status", "lines": [
                "Graduate student in Computer Science",
                "Based in Los Angeles, California",
            ]},
            {"heading": "Specialization", "lines": [
                "Lead scoring, agentic AI frameworks, risk flagging and sentiment analysis",
                "with PySpark, LLMs and cloud tooling.",
            ]},
        ],
    },
    "skills": {
        "title": "POWER-UPS COLLECTED!",
        "sections": [
            {"heading": "Programming Languages",
             "lines": ["Python - Java - C - C++ - R - SQL - JavaScript"]},
            {"heading": "Data Science & ML",
             "lines": ["PySpark - TensorFlow - PyTorch - scikit-learn - pandas - LangChain"]},
            {"heading": "Cloud & Big Data",
             "lines": ["Azure - Databricks - Spark - Hadoop - MongoDB - MLflow"]},
            {"heading": "Tools & Frameworks",
             "lines": ["Flask - Django - Streamlit - Tableau - Git - Docker - Kubernetes"]},
        ],
    },
    "experience": {
        "title": "LEVEL PROGRESS",
        "sections": [
            {"heading": "Data Scientist / Software Engineer (ML/AI)", "lines": [
                "Predictive lead scoring model",
                "Agentic research framework",
                "Automated risk flagging system",
                "Data pipeline optimisation",
            ]},
            {"heading": "Software Development Intern", "lines": [
                "Automated API mapping",
                "Slack bots and monitoring dashboards",
            ]},
        ],
    },
    "projects": {
        "title": "ACHIEVEMENTS UNLOCKED!",
        "sections": [
            {"heading": "Dysarthria Detection",
             "lines": ["CNN+LSTM speech defect detection with a Streamlit front end"]},
            {"heading": "Book Recommendations",
             "lines": ["Django platform backed by a public books API"]},
            {"heading": "Anime Recommendation System",
             "lines": ["Hybrid collaborative and content-based recommender"]},
        ],
    },
}
