NOT_FOUND_SENTINEL = "Not found in medical knowledge base."
DISCLAIMER = (
    "This information is for educational purposes only and is not a substitute "
    "for professional medical advice, diagnosis, or treatment. Please consult a "
    "qualified healthcare professional."
)
FAILURE_MESSAGE = "I'm sorry, I encountered a technical error. Please try again."
NO_DOCUMENTS_CONTEXT = "NO RELEVANT DOCUMENTS FOUND."
IMAGE_DIRECTIVE = (
    "Please analyze the attached medical image/report based on the knowledge base."
)
DOCUMENT_LABEL = "Clinical Document"
