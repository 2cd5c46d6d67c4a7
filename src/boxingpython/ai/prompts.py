"""Prompts sent alongside the uploaded video."""

RELEVANCE_PROMPT = """You are a content detection system. Analyze this video and determine if it contains boxing \
training or fighting activity.

Answer ONLY with one word:
- "YES" if the video shows: boxing training, sparring, bag work, pad work, shadow boxing, or any boxing/martial \
arts fighting
- "NO" if the video shows: unrelated content like cooking, talking, walking, nature, animals, or any non-combat sports

Be strict. If there are no visible punches, kicks, or fighting techniques, answer "NO"."""

AFFIRMATIVE_ANSWER = "YES"

ANALYSIS_PROMPT = """Analyze this boxing training video and provide detailed metrics.

Please analyze and extract:
1. Total Strikes: Count all visible punches thrown throughout the video
2. Power Analysis: Average power level (0-100) and Peak power moment (0-100)
3. Speed: Estimate average punch speed in km/h
4. Accuracy: Estimate punch accuracy percentage (0-100)
5. Training Mode: Identify (Shadow Boxing, Bag Work, Pad Work, Sparring, or Other)
6. Intensity: Rate as Low, Medium, High, or Extreme
7. Technique: List 3-5 specific techniques observed
8. Strengths: List 2-3 key strengths
9. Improvements: List 2-3 areas for improvement
10. Footwork: Brief description of footwork quality
11. Defense: Brief description of defensive skills
12. Overall Rating: Give a score from 1-10 for overall performance
13. Summary: Provide a 2-3 sentence summary of the performance

IMPORTANT: Respond with ONLY a valid JSON object. Do NOT use code blocks (```json). Do NOT include any markdown \
formatting. Just the raw JSON. Use these exact key names:
- "Total_Strikes" (number)
- "Average_Power" (number 0-100)
- "Peak_Power" (number 0-100)
- "Speed" (number in km/h)
- "Accuracy" (number 0-100)
- "Training_Mode" (string)
- "Intensity" (string: Low/Medium/High/Extreme)
- "Technique" (array of strings)
- "Strengths" (array of strings)
- "Improvements" (array of strings)
- "Footwork" (string)
- "Defense" (string)
- "Overall_Rating" (number 1-10)
- "Summary" (string)"""
