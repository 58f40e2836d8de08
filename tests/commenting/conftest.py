"""Test configuration and fixtures for comment insertion tests."""

import pytest


# Mixed declarations, some already commented
SAMPLE_SOURCE = '''import axios from "axios";

// Loads the current user profile.
export async function loadProfile(id) {
  return axios.get(`/users/${id}`);
}

function getUserData(userId, options) {
  const res = fetch(`/api/users/${userId}`);
  return res;
}

const handleSubmit = (values) => {
  setName(values.name);
  console.log("submitted", values);
};

const computeTotal = async (items, taxRate = 0.2) => {
  return items.reduce((sum, item) => sum + item.price, 0);
};

const toggle = flag => !flag;'''

UNRECOGNISED_SOURCE = '''let x = 1;
class Widget {
  render() {
    return null;
  }
}
export default Widget;'''

BLOCK_COMMENTED_SOURCE = '''/* Creates a widget. */
function createWidget(config) {
  return { ...config };
}'''


@pytest.fixture
def sample_source():
    """Source with a mix of commented and uncommented functions."""
    return SAMPLE_SOURCE


@pytest.fixture
def unrecognised_source():
    """Source without any line the detector recognises."""
    return UNRECOGNISED_SOURCE


@pytest.fixture
def block_commented_source():
    """Function already preceded by a block comment."""
    return BLOCK_COMMENTED_SOURCE
