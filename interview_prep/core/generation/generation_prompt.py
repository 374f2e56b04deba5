"""
Generation prompt templates.

Question/answer and concept explanation prompts. Both instruct the model
to reply with bare JSON only.

Dependencies: langchain_core.prompts
System role: Prompt templates for the generation gateway
"""

from langchain_core.prompts import ChatPromptTemplate

QUESTION_ANSWER_TEMPLATE = """You are an AI trained to generate technical interview questions and answers.

Task:
  - Role: {role}
  - Candidate Experience: {experience} years
  - Focus Topics: {topics_to_focus}
  - Write {number_of_questions} interview questions.
  - For each answer that needs a code example, add a small code block inside.
  - Keep formatting very clean
  - Return a pure JSON array like:
    [
      {{
        "question": "Question here?",
        "answer": "Answer here."
      }}
    ]
  - Important: Do NOT add any extra text. Only return valid JSON."""

CONCEPT_EXPLAIN_TEMPLATE = """You are an AI trained to generate explanations for a given interview question.

Task:
  - Explain the following interview question and its concept in depth as if you're teaching a beginner developer.
  - Question: "{question}"
  - After the explanation, provide a short and clear title that summarises the concept for the article or page header.
  - If the explanation includes a code example, provide a small code block.
  - Keep the formatting very clean and clear.
  - Return a pure JSON object like:
    {{
      "title": "Short title here",
      "explanation": "Explanation here."
    }}
  - Important: Do NOT add any extra text. Only return valid JSON."""

QUESTION_ANSWER_PROMPT = ChatPromptTemplate.from_messages([
    ("human", QUESTION_ANSWER_TEMPLATE),
])

CONCEPT_EXPLAIN_PROMPT = ChatPromptTemplate.from_messages([
    ("human", CONCEPT_EXPLAIN_TEMPLATE),
])
