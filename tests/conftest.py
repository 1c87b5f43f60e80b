import pytest
from bs4 import BeautifulSoup


PROFILE_HTML = """
<html><body>
<div class="prose max-w-full"><h1> Acme Robotics </h1></div>
<div class="prose hidden max-w-full md:block"><div class="text-xl">Robots for warehouses</div></div>
<div class="h-32 w-32 shrink-0 clip-circle-32"><img src="https://cdn.example.com/logo.png"></div>
<div class="align-center flex flex-row flex-wrap gap-y-2 gap-x-2">
  <a class="ycdc-badge"><span>Y Combinator Logo</span>W21</a>
  <span class="ycdc-badge">B2B</span>
</div>
<p class="whitespace-pre-line">Acme builds autonomous forklifts.</p>
<div class="group flex flex-row items-center px-3 leading-none text-linkColor"><a href="https://acme.example">acme.example</a></div>
<div class="ycdc-card space-y-1.5 sm:w-[300px]">
  <img src="https://cdn.example.com/banner.png">
  <div class="flex flex-row justify-between"><span>Founded:</span><span>2020</span></div>
  <div class="flex flex-row justify-between"><span>Team Size:</span><span>42</span></div>
  <div class="flex flex-row justify-between"><span>Location:</span><span>San Francisco</span></div>
  <div class="space-x-2">
    <a class="inline-block w-5 h-5 bg-contain" title="Twitter account" href="https://twitter.com/acme"></a>
    <a class="inline-block w-5 h-5 bg-contain" title="LinkedIn profile" href="https://linkedin.com/company/acme"></a>
    <a class="inline-block w-5 h-5 bg-contain" href="https://facebook.com/acme"></a>
  </div>
</div>
<a class="ycdc-badge ml-0 font-bold no-underline">2</a>
<div class="flex w-full flex-row justify-between py-4">
  <div class="ycdc-with-link-color pr-4 text-lg font-bold"><a href="/jobs/1">Robotics Engineer</a></div>
  <div class="justify-left">
    <div class="list-item">San Francisco, CA</div>
    <div class="list-item">$150K - $200K</div>
    <div class="list-item">0.1% - 0.5%</div>
    <div class="list-item">US citizen/visa only</div>
  </div>
</div>
<div class="flex w-full flex-row justify-between py-4">
  <div class="ycdc-with-link-color pr-4 text-lg font-bold"><a href="/jobs/2">Sales Lead</a></div>
  <div class="justify-left"><div class="list-item">Remote</div></div>
</div>
<div class="ycdc-card shrink-0 space-y-1.5 sm:w-[300px]">
  <img src="https://cdn.example.com/jane.jpg">
  <div class="leading-snug"><div class="font-bold">Jane Doe</div><div>Founder/CEO</div></div>
  <a class="inline-block h-5 w-5 bg-contain" title="Twitter account" href="https://twitter.com/jane"></a>
</div>
<div id="news">
  <div><div class="ycdc-with-link-color"><a class="prose font-medium" href="https://news.example/a">Acme raises seed</a></div><div>Mar 16, 2023</div></div>
  <div><div class="ycdc-with-link-color"><a class="prose font-medium" href="https://news.example/b">Acme launches</a></div><div></div></div>
</div>
<div class="company-launch">
  <h3>Launch YC: Acme</h3>
  <div class="prose max-w-full whitespace-pre-line">Forklifts that drive themselves.</div>
  <a href="/launches/abc-acme">Read Launch</a>
</div>
<div class="company-launch">
  <h3>Untitled draft</h3>
  <a href="/launches/draft">Read Launch</a>
</div>
</body></html>
"""

LAUNCH_HTML = """
<html><body>
<div class="vote-count-container"><div>upvote</div><div>128</div></div>
<time class="timeago" datetime="2023-04-01T12:00:00Z">a year ago</time>
<div class="launch-container">
  <div class="header">Launch YC</div>
  <div>
    <p>Hello</p>
    <div><img src="/img.png"></div>
    <div><iframe src="https://www.youtube.com/embed/xyz"></iframe></div>
    <div><img src="/img.png"></div>
  </div>
</div>
</body></html>
"""

EMPTY_HTML = "<html><body><p>Nothing here</p></body></html>"


@pytest.fixture
def profile_html():
    return PROFILE_HTML


@pytest.fixture
def launch_html():
    return LAUNCH_HTML


@pytest.fixture
def profile_soup():
    return BeautifulSoup(PROFILE_HTML, "lxml")


@pytest.fixture
def launch_soup():
    return BeautifulSoup(LAUNCH_HTML, "lxml")


@pytest.fixture
def empty_soup():
    return BeautifulSoup(EMPTY_HTML, "lxml")
