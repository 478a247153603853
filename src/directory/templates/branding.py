MARKETPLACE_NAME = "Talabat Rwanda"
