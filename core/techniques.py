"""
Catalog of prompting techniques and their canned example prompts.

- Zero-shot: the task is stated directly, with no examples, relying on the
  model's general knowledge.
- Few-shot: several worked examples precede the task (one example is
  "one-shot").
- Chain-of-thought: examples spell out intermediate reasoning steps so the
  model answers with a structured, step-by-step solution.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass(frozen=True)
class Example:
    key: str
    title: str
    prompt: str
    # Per-example override of the technique temperature
    temperature: Optional[float] = None


@dataclass(frozen=True)
class Technique:
    key: str
    title: str
    icon: str
    description: str
    temperature: float
    max_tokens: Optional[int] = None
    examples: List[Example] = field(default_factory=list)

    def param_overrides(self) -> Dict[str, float]:
        """Parameters this technique changes relative to the defaults."""
        overrides = {"temperature": self.temperature}
        if self.max_tokens is not None:
            overrides["max_tokens"] = self.max_tokens
        return overrides


# =============================================================================
# Zero-shot
# =============================================================================

ZERO_SHOT = Technique(
    key="zero_shot",
    title="Zero-Shot",
    icon="🎯",
    description="Direct questions without examples",
    temperature=0.3,  # focused responses
    examples=[
        Example(
            key="text_classification",
            title="Text Classification",
            prompt="""Classify the following text as either "positive", "negative", or "neutral":
Text: "I absolutely love this new restaurant! The food was amazing and the service was excellent."
Classification:""",
        ),
        Example(
            key="question_answering",
            title="Question Answering",
            prompt="""Answer the following question based on general knowledge:
Question: What is the capital of Japan and what is it famous for?
Answer:""",
        ),
        Example(
            key="language_translation",
            title="Language Translation",
            prompt="""Translate the following English text to French:
English: "Hello, how are you today? I hope you're having a wonderful day!"
French:""",
        ),
        Example(
            key="code_generation",
            title="Code Generation",
            prompt="""Write a Python function that calculates the factorial of a number:
Function name: calculate_factorial
Input: integer n
Output: factorial of n
Include error handling for negative numbers.
Code:""",
        ),
    ],
)


# =============================================================================
# Few-shot
# =============================================================================

FEW_SHOT = Technique(
    key="few_shot",
    title="Few-Shot",
    icon="🎪",
    description="Learning from provided examples",
    temperature=0.5,
    max_tokens=800,
    examples=[
        Example(
            key="sentiment_analysis",
            title="Sentiment Analysis",
            prompt="""Analyze the sentiment of the following texts. Classify each as "positive", "negative", or "neutral".

Examples:
Text: "I love this product! It's amazing!"
Sentiment: positive

Text: "This is terrible. I hate it."
Sentiment: negative

Text: "The weather is okay today."
Sentiment: neutral

Text: "The customer service was outstanding and they resolved my issue quickly."
Sentiment: positive

Now classify this text:
Text: "The movie was disappointing. The plot was confusing and the acting was mediocre."
Sentiment:""",
        ),
        Example(
            key="entity_extraction",
            title="Entity Extraction",
            prompt="""Extract named entities from the given text. Identify PERSON, ORGANIZATION, and LOCATION entities.

Examples:
Text: "John Smith works at Microsoft in Seattle."
Entities:
- PERSON: John Smith
- ORGANIZATION: Microsoft
- LOCATION: Seattle

Text: "Apple Inc. was founded by Steve Jobs in Cupertino."
Entities:
- ORGANIZATION: Apple Inc.
- PERSON: Steve Jobs
- LOCATION: Cupertino

Text: "The meeting with Google representatives will be held in San Francisco."
Entities:
- ORGANIZATION: Google
- LOCATION: San Francisco

Now extract entities from this text:
Text: "Dr. Sarah Johnson from Harvard University will present her research at the conference in Boston next week."
Entities:""",
        ),
        Example(
            key="code_completion",
            title="Code Completion",
            prompt='''Complete the following code snippets based on the pattern shown in the examples:

Example 1:
Input: Create a function to add two numbers
Output:
def add_numbers(a, b):
    """Add two numbers and return the result."""
    return a + b

Example 2:
Input: Create a function to multiply two numbers
Output:
def multiply_numbers(a, b):
    """Multiply two numbers and return the result."""
    return a * b

Example 3:
Input: Create a function to check if a number is even
Output:
def is_even(number):
    """Check if a number is even."""
    return number % 2 == 0

Now complete this:
Input: Create a function to find the maximum of three numbers
Output:''',
        ),
        Example(
            key="email_classification",
            title="Email Classification",
            prompt="""Classify emails into categories: "urgent", "marketing", "support", or "general".

Examples:
Email: "URGENT: Server is down! Please fix immediately!"
Category: urgent

Email: "Check out our amazing 50% off sale this weekend!"
Category: marketing

Email: "I'm having trouble logging into my account. Can you help?"
Category: support

Email: "Thank you for your purchase. Your order has been shipped."
Category: general

Email: "SPECIAL OFFER: Buy 2 get 1 free on all products!"
Category: marketing

Now classify this email:
Email: "Hi, I need assistance with setting up my new account. The verification email never arrived."
Category:""",
        ),
        Example(
            key="creative_writing",
            title="Creative Writing",
            temperature=0.8,
            prompt="""Write a short story opening based on the given prompt. Follow the style shown in the examples:

Example 1:
Prompt: A mysterious package arrives
Opening: The package sat on her doorstep like a riddle wrapped in brown paper. No return address, no delivery notice, just her name written in elegant script that seemed to shimmer in the morning light.

Example 2:
Prompt: First day at a new job
Opening: The elevator climbed twenty-three floors, and with each passing number, Marcus felt his confidence slip another notch. By the time the doors opened, he was pretty sure he'd made a terrible mistake.

Example 3:
Prompt: Finding an old diary
Opening: The diary's leather cover was worn smooth by decades of handling, its pages yellowed and brittle. As Emma opened it, the scent of lavender and old secrets escaped into the dusty attic air.

Now write an opening for this prompt:
Prompt: Waking up in a world where colors have disappeared
Opening:""",
        ),
    ],
)


# =============================================================================
# Chain-of-thought
# =============================================================================

CHAIN_OF_THOUGHT = Technique(
    key="chain_of_thought",
    title="Chain-of-Thought",
    icon="🧠",
    description="Step-by-step reasoning process",
    temperature=0.4,  # logical reasoning
    max_tokens=1000,  # room for the intermediate steps
    examples=[
        Example(
            key="math_problem_solving",
            title="Math Problem Solving",
            prompt="""Solve the following math problem step by step. Show your reasoning process.

Problem: A store is having a sale. Sarah buys 3 shirts that normally cost $25 each, but they're 20% off. She also buys 2 pairs of jeans that cost $40 each with no discount. If she pays with a $200 gift card, how much money will she have left on the card?

Let me think through this step by step:

Step 1: Calculate the original cost of the shirts
3 shirts × $25 each = $75

Step 2: Calculate the discount on the shirts
20% of $75 = 0.20 × $75 = $15

Step 3: Calculate the discounted price of the shirts
$75 - $15 = $60

Step 4: Calculate the cost of the jeans
2 pairs × $40 each = $80

Step 5: Calculate the total purchase amount
Shirts: $60 + Jeans: $80 = $140

Step 6: Calculate the remaining amount on the gift card
$200 - $140 = $60

Therefore, Sarah will have $60 left on her gift card.

Now solve this problem using the same step-by-step approach:

Problem: Tom is planning a party for 24 people. Each pizza serves 8 people and costs $12. He also wants to buy drinks that cost $3 per person. If he has a $150 budget, how much money will he have left after buying the food and drinks?

Let me think through this step by step:""",
        ),
        Example(
            key="logical_reasoning",
            title="Logical Reasoning",
            prompt="""Solve the following logical reasoning problem by thinking through each step.

Example:
Problem: All cats are mammals. All mammals are animals. Fluffy is a cat. Is Fluffy an animal?

Reasoning:
1. Given: All cats are mammals
2. Given: All mammals are animals
3. Given: Fluffy is a cat
4. From 1 and 3: Since Fluffy is a cat, and all cats are mammals, Fluffy is a mammal
5. From 2 and 4: Since Fluffy is a mammal, and all mammals are animals, Fluffy is an animal

Conclusion: Yes, Fluffy is an animal.

Now solve this problem using the same logical reasoning approach:

Problem: All teachers at Riverside School speak at least two languages. Ms. Johnson teaches at Riverside School. Everyone who speaks at least two languages can tutor international students. Can Ms. Johnson tutor international students?

Reasoning:""",
        ),
        Example(
            key="problem_decomposition",
            title="Problem Decomposition",
            prompt="""Break down the following complex problem into smaller, manageable steps and solve it systematically.

Example:
Problem: Design a simple mobile app for a local restaurant

Step-by-step breakdown:
1. Identify core requirements
   - Menu display
   - Order placement
   - Location and contact info
   - User accounts

2. Plan user interface
   - Home screen with navigation
   - Menu categories and items
   - Shopping cart functionality
   - Checkout process

3. Consider technical requirements
   - Database for menu items
   - Payment processing integration
   - Push notifications for order status
   - Backend API for order management

4. Implementation phases
   - Phase 1: Basic menu display
   - Phase 2: Order functionality
   - Phase 3: User accounts and history
   - Phase 4: Advanced features

Now break down this complex problem using the same systematic approach:

Problem: Plan a sustainable office renovation project for a 50-person company that wants to reduce their environmental impact while improving employee productivity.

Step-by-step breakdown:""",
        ),
        Example(
            key="code_debugging",
            title="Code Debugging",
            prompt="""Debug the following code by thinking through the logic step by step.

Example:
Code with bug:
def calculate_average(numbers):
    total = 0
    for num in numbers:
        total += num
    return total / len(numbers)

# Test
result = calculate_average([])
print(result)

Debugging process:
1. Analyze what the function should do: Calculate the average of a list of numbers
2. Trace through the code:
   - Initialize total = 0
   - Loop through numbers and add to total
   - Return total divided by length of numbers
3. Identify the problem: When numbers is empty list [], len(numbers) = 0
4. Issue: Division by zero will raise ZeroDivisionError
5. Solution: Add check for empty list

Fixed code:
def calculate_average(numbers):
    if not numbers:  # Check if list is empty
        return 0     # or raise ValueError("Cannot calculate average of empty list")
    total = 0
    for num in numbers:
        total += num
    return total / len(numbers)

Now debug this code using the same systematic approach:

Code with bug:
def find_max_value(data):
    max_val = 0
    for item in data:
        if item > max_val:
            max_val = item
    return max_val

# Test cases
print(find_max_value([1, 5, 3, 9, 2]))  # Should return 9
print(find_max_value([-5, -2, -8, -1]))  # Should return -1
print(find_max_value([]))  # Should handle empty list

Debugging process:""",
        ),
        Example(
            key="decision_making",
            title="Decision Making",
            prompt="""Analyze the following decision scenario step by step, considering all factors.

Example:
Decision: Should I accept a job offer in another city?

Analysis framework:
1. Define the decision criteria
   - Salary and benefits
   - Career growth opportunities
   - Cost of living
   - Work-life balance
   - Distance from family/friends

2. Evaluate current situation
   - Current salary: $70K
   - Limited growth opportunities
   - Low cost of living
   - Close to family

3. Evaluate new opportunity
   - New salary: $95K (+$25K)
   - Strong growth potential
   - Higher cost of living (+$15K/year)
   - 500 miles from family

4. Calculate net benefits
   - Financial: +$10K after cost of living
   - Career: Significant improvement
   - Personal: Some sacrifice in family time

5. Consider long-term implications
   - Career trajectory over 5 years
   - Potential for remote work
   - Family visit frequency

Conclusion: Accept if career growth is priority and financial gain justifies personal costs.

Now analyze this decision using the same systematic approach:

Decision: Should a small business owner invest $50,000 in new equipment or hire two additional employees?

Analysis framework:""",
        ),
    ],
)


TECHNIQUES: Dict[str, Technique] = {
    t.key: t for t in (ZERO_SHOT, FEW_SHOT, CHAIN_OF_THOUGHT)
}


def get_technique(key: str) -> Technique:
    """Look up a technique by key; raises KeyError for unknown keys."""
    try:
        return TECHNIQUES[key]
    except KeyError:
        raise KeyError(f"Unknown technique: {key}. Available: {', '.join(TECHNIQUES)}") from None
