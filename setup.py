# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="product-showcase-kiosk",
    version="0.1.0",
    packages=find_namespace_packages(include=['src', 'src.*', 'api', 'api.*', 'config', 'frontend', 'frontend.*']),
    py_modules=['run_kiosk'],
    install_requires=[
        'fastapi>=0.100.0',
        'uvicorn>=0.23.0',
        'python-dotenv>=1.0.0',
        'pydantic>=2.0.0',
        'pydantic-settings>=2.0.0',
        'python-json-logger>=2.0.0',
        'cachetools>=5.0.0',
        'SpeechRecognition>=3.10.0',
        'customtkinter>=5.2.0',
        'pillow>=10.0.0',
        'requests>=2.26.0',
        'python-docx>=1.0.0',
        'langchain-core>=0.2.0',
        'langchain-google-genai>=1.0.0',
        'langchain-openai>=0.1.0',
    ],
    extras_require={
        # Microphone capture on the kiosk itself; needs PortAudio headers
        'kiosk': [
            'pyaudio>=0.2.11',
        ],
        'test': [
            'pytest>=7.0.0',
            'httpx>=0.24.0',
        ],
    },
    python_requires='>=3.9',
    package_dir={"": "."},
    include_package_data=True,
)
