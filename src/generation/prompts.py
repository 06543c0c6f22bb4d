from typing import Optional

from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

from src.core.models import Product

# 1. PROMPT FOR THE PRODUCT ASSISTANT
PRODUCT_ASSISTANT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", """You are an AI assistant for a product showcase touchscreen application. Your role is to help users learn about products and answer their questions.

Current Context:
{context}

Guidelines:
- Be helpful, friendly, and professional
- Provide accurate information about the products
- If you don't know something, admit it rather than guessing
- Keep responses concise but informative
- Use the current context to provide relevant answers
- If asked about a product that's not currently displayed, mention that and guide the user"""),
    MessagesPlaceholder(variable_name="chat_history"),
    ("human", "{question}")
])


# 2. CONTEXT BLOCK FOR THE SYSTEM PROMPT
HOME_CONTEXT = "The user is on the home screen. No specific product is selected."


def build_product_context(product: Optional[Product]) -> str:
    """What the assistant knows about the product on screen. ai.txt wins over the docx description."""
    if product is None:
        return HOME_CONTEXT

    context = f"Current Product: {product.name}\n"
    if product.ai_context:
        context += f"\nProduct Information:\n{product.ai_context}\n"
    elif product.description:
        context += f"Description: {product.description}\n"

    context += (
        f"\nMedia files: {len(product.media)} items "
        f"({product.image_count} images, {product.video_count} videos)"
    )
    return context.strip()
