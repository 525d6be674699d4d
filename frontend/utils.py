import streamlit as st
import requests
import os

# --- Configuration ---
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5001/api/v1")
DOWNLOAD_FILENAME = "nrc_townships.sql"
DOWNLOAD_MIME = "text/plain"


# --- API Call Functions ---

def api_post_request(endpoint, payload):
    """Helper function to make POST requests to the API."""
    try:
        response = requests.post(f"{API_BASE_URL}/{endpoint}", json=payload)
        response.raise_for_status()  # Raise an exception for HTTP errors (4xx or 5xx)
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        st.error(f"HTTP error occurred: {http_err} - Response: {response.text}")
        try:
            return response.json() # Try to return JSON error details if possible
        except ValueError:
            return {"error": response.text, "status_code": response.status_code}
    except requests.exceptions.RequestException as req_err:
        st.error(f"Request error occurred: {req_err}")
        return {"error": str(req_err)}
    except ValueError as json_err: # Handle cases where response is not JSON
        st.error(f"JSON decode error: {json_err} - Response: {response.text}")
        return {"error": "Failed to decode JSON response", "raw_response": response.text}

def api_get_request(endpoint, params=None):
    """Helper function to make GET requests to the API."""
    try:
        response = requests.get(f"{API_BASE_URL}/{endpoint}", params=params)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as http_err:
        st.error(f"HTTP error occurred: {http_err} - Response: {response.text}")
        try:
            return response.json()
        except ValueError:
            return {"error": response.text, "status_code": response.status_code}
    except requests.exceptions.RequestException as req_err:
        st.error(f"Request error occurred: {req_err}")
        return {"error": str(req_err)}
    except ValueError as json_err:
        st.error(f"JSON decode error: {json_err} - Response: {response.text}")
        return {"error": "Failed to decode JSON response", "raw_response": response.text}

def nrc_convert_api(input_text, check_output=False):
    """Calls the /nrc/convert endpoint."""
    payload = {"input_text": input_text}
    if check_output:
        payload["check_output"] = True
    return api_post_request("nrc/convert", payload)

def nrc_help_api():
    """Calls the /nrc/help endpoint."""
    return api_get_request("nrc/help")
