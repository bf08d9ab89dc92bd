SOURCE_TYPES = [
    "Book",
    "Journal",
    "Magazine",
    "Conference paper",
    "Website",
]

TAGS = [
    "Description downdraft gasifier",
    "Advantage of downdraft gasifier",
    "Disadvantage of downdraft gasifier",
    "Description updraft gasifier",
    "Fluidised bed reactor",
    "Tar content",
]
