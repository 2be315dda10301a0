"""Hand-maintained spellings that map onto devicon identifiers.

Rules are checked top to bottom and the first rule listing a spelling wins.
Targets are not checked against the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class AliasRule:
    """A set of accepted spellings that all resolve to ``target``."""

    match_set: frozenset[str]
    target: str

    @classmethod
    def of(cls, target: str, *spellings: str) -> AliasRule:
        return cls(frozenset(spelling.strip().lower() for spelling in spellings), target)


def _rules(*pairs: tuple[str, tuple[str, ...]]) -> tuple[AliasRule, ...]:
    return tuple(AliasRule.of(target, *spellings) for target, spellings in pairs)


ALIAS_RULES: tuple[AliasRule, ...] = _rules(
    # JavaScript frameworks and libraries
    ("vuejs", ("vue.js", "vue js", "vue")),
    ("react", ("react.js", "react js", "react")),
    ("react", ("react native",)),
    ("angularjs", ("angular.js", "angular js", "angular")),
    ("nodejs", ("node.js", "node js", "node")),
    ("express", ("express.js", "express js", "express")),
    ("nextjs", ("next.js", "next js")),
    ("nuxtjs", ("nuxt.js", "nuxt js")),
    ("jquery", ("jquery",)),
    ("d3js", ("d3", "d3.js")),
    # Core web
    ("javascript", ("js",)),
    ("typescript", ("ts",)),
    ("html5", ("html", "html 5")),
    ("css3", ("css", "css 3")),
    # CSS frameworks
    ("tailwindcss", ("tailwind css", "tailwind")),
    ("sass", ("sass",)),
    ("less", ("less",)),
    ("bootstrap", ("bootstrap",)),
    # C family and .NET
    ("csharp", ("c#",)),
    ("cplusplus", ("c++",)),
    ("dot-net", (".net", "dotnet")),
    ("microsoftsqlserver", ("sql server", "microsoft sql server")),
    # Java and the JVM
    ("java", ("java",)),
    ("spring", ("spring", "spring boot")),
    ("kotlin", ("kotlin",)),
    # Python
    ("jupyter", ("jupyter notebook", "jupyter", "jupyterlab", "jupyter lab")),
    ("fastapi", ("fastapi",)),
    ("django", ("django",)),
    ("flask", ("flask",)),
    # Databases
    ("postgresql", ("postgresql", "postgres")),
    ("mongodb", ("mongo", "mongodb")),
    ("mysql", ("mysql",)),
    ("sqlite", ("sqlite",)),
    ("redis", ("redis",)),
    # Cloud and DevOps
    ("amazonwebservices", ("aws", "amazon web services")),
    ("googlecloud", ("gcp", "google cloud")),
    ("kubernetes", ("kubernetes", "k8s")),
    ("digitalocean", ("digital ocean",)),
    ("tensorflow", ("tf", "tensorflow")),
    ("docker", ("docker",)),
    ("git", ("git",)),
    ("linux", ("linux",)),
    # Mobile
    ("android", ("android",)),
    ("flutter", ("flutter",)),
    ("swift", ("swift",)),
    # Tools
    ("go", ("go", "golang")),
    ("vscode", ("visual studio code", "vscode")),
    ("visualstudio", ("visual studio",)),
    ("rails", ("ruby on rails", "rails")),
    ("php", ("php",)),
    ("figma", ("figma",)),
    ("aftereffects", ("after effects",)),
    # Data science and ML
    ("pytorch", ("pytorch",)),
    ("scikit-learn", ("scikit-learn", "sklearn")),
    ("pandas", ("pandas",)),
    ("numpy", ("numpy",)),
    ("r", ("r", "rlang")),
    ("matlab", ("matlab",)),
    ("azure", ("azure",)),
    ("firebase", ("firebase",)),
    ("oracle", ("oracle", "oci")),
    ("terraform", ("terraform",)),
    ("ansible", ("ansible",)),
    ("jenkins", ("jenkins",)),
    ("github", ("github", "github actions")),
    ("gitlab", ("gitlab",)),
    ("bitbucket", ("bitbucket",)),
    ("nginx", ("nginx",)),
    ("apache", ("apache",)),
    ("kafka", ("kafka", "apache kafka")),
    # Shells
    ("bash", ("bash", "shell", "shell script")),
    ("powershell", ("powershell",)),
    # Other languages and frameworks
    ("c", ("c",)),
    ("dart", ("dart",)),
    ("svelte", ("svelte",)),
    ("graphql", ("graphql",)),
    ("wordpress", ("wordpress",)),
    ("laravel", ("laravel",)),
    # Game dev
    ("unity", ("unity",)),
    ("unrealengine", ("unreal engine",)),
    # Design and productivity
    ("blender", ("blender",)),
    ("photoshop", ("photoshop",)),
    ("illustrator", ("illustrator",)),
    ("xd", ("adobe xd", "xd")),
    ("jira", ("jira",)),
    ("trello", ("trello",)),
    ("notion", ("notion",)),
    # JS tooling
    ("jest", ("jest",)),
    ("cypress", ("cypress",)),
    ("webpack", ("webpack",)),
    ("vitejs", ("vite", "vitejs")),
    ("babel", ("babel",)),
    ("eslint", ("eslint",)),
    ("prettier", ("prettier",)),
    ("raspberrypi", ("raspberry pi",)),
    # More languages
    ("rust", ("rust",)),
    ("scala", ("scala",)),
    ("lua", ("lua",)),
    ("perl", ("perl",)),
    ("elixir", ("elixir",)),
    ("haskell", ("haskell",)),
    ("clojure", ("clojure",)),
    ("erlang", ("erlang",)),
    ("fsharp", ("f#", "fsharp")),
    ("objectivec", ("objective-c", "objectivec")),
    # Monitoring, CI and networking
    ("prometheus", ("prometheus",)),
    ("grafana", ("grafana",)),
    ("vagrant", ("vagrant",)),
    ("haproxy", ("HAProxy",)),
    ("travis", ("travis", "travis ci")),
    ("circleci", ("circleci",)),
    ("sonarqube", ("sonarqube",)),
    # Search, queues and more databases
    ("elasticsearch", ("elasticsearch",)),
    ("kibana", ("kibana",)),
    ("logstash", ("logstash",)),
    ("cassandra", ("cassandra",)),
    ("couchdb", ("couchdb",)),
    ("neo4j", ("neo4j",)),
    ("rabbitmq", ("rabbitmq",)),
    # More JS frameworks
    ("svelte", ("sveltekit",)),
    ("gatsby", ("gatsby",)),
    ("ember", ("ember",)),
    ("backbonejs", ("backbone", "backbonejs")),
    ("redux", ("redux",)),
    ("gulp", ("gulp",)),
    ("grunt", ("grunt",)),
    # Editors and chat
    ("qt", ("qt",)),
    ("unrealengine", ("unreal",)),
    ("sketch", ("sketch",)),
    ("invision", ("invision",)),
    ("slack", ("slack",)),
    ("discord", ("discord",)),
    ("atom", ("atom",)),
    ("vim", ("vim",)),
    ("neovim", ("neovim", "nvim")),
    ("sublimetext", ("sublime text",)),
    ("androidstudio", ("android studio",)),
    ("xcode", ("xcode",)),
    ("intellij", ("intellij",)),
    ("pycharm", ("pycharm",)),
    ("webstorm", ("webstorm",)),
    # Cloud services that share their provider's icon
    ("amazonwebservices", ("aws s3", "s3")),
    ("amazonwebservices", ("aws lambda", "lambda")),
    ("amazonwebservices", ("aws ec2", "ec2")),
    ("amazonwebservices", ("aws rds", "rds")),
    ("azure", ("azure functions",)),
    ("googlecloud", ("google cloud functions", "gcloud functions")),
    ("heroku", ("heroku",)),
    # CMS
    ("joomla", ("joomla",)),
    ("drupal", ("drupal",)),
    ("shopify", ("shopify",)),
    ("magento", ("magento",)),
    # Package managers and styling
    ("npm", ("npm",)),
    ("yarn", ("yarn",)),
    ("pnpm", ("pnpm",)),
    ("styledcomponents", ("styled components",)),
    ("emotion", ("emotion",)),
    ("materialui", ("material ui", "mui")),
    # Testing
    ("mocha", ("mocha",)),
    ("chai", ("chai",)),
    ("selenium", ("selenium",)),
    ("puppeteer", ("puppeteer",)),
    ("playwright", ("playwright",)),
    ("postman", ("postman",)),
    ("confluence", ("confluence",)),
    ("blender", ("blender",)),
    ("premierepro", ("premiere pro", "premiere")),
    ("rstudio", ("rstudio",)),
    ("eclipse", ("eclipse",)),
    ("webflow", ("webflow",)),
    # PHP
    ("composer", ("composer",)),
    ("symfony", ("symfony",)),
    ("codeigniter", ("codeigniter",)),
    ("cakephp", ("cakephp",)),
    ("doctrine", ("doctrine",)),
    # Ruby
    ("ruby", ("ruby",)),
    ("rubygems", ("rubygems",)),
    # .NET
    ("blazor", ("blazor",)),
    ("entityframeworkcore", ("entity framework", "ef")),
    # Database tools
    ("datagrip", ("datagrip",)),
    ("dbeaver", ("dbeaver",)),
    ("dynamodb", ("dynamodb", "aws dynamodb")),
    ("couchbase", ("couchbase",)),
    # Build tools and CI/CD
    ("gradle", ("gradle",)),
    ("maven", ("maven",)),
    ("ant", ("ant",)),
    ("teamcity", ("teamcity",)),
    ("azure", ("azure devops",)),
    ("argocd", ("argocd", "argo cd")),
    # Virtualisation and orchestration
    ("virtualbox", ("virtualbox",)),
    ("docker", ("docker compose",)),
    ("vmware", (" vmware",)),
    ("openshift", ("openshift",)),
    ("rancher", ("rancher",)),
    # Misc
    ("putty", ("putty",)),
    ("threejs", ("threejs", "three.js")),
    ("socketio", ("socket.io", "socket io")),
    ("markdown", ("markdown", "md")),
    ("docusaurus", ("docusaurus",)),
    ("apachespark", ("apache spark", "spark")),
    ("hadoop", ("hadoop",)),
    ("raspberrypi", ("rpi",)),
)


def build_alias_index(rules: Iterable[AliasRule]) -> dict[str, str]:
    """Flatten ordered rules into a spelling -> target lookup, first rule wins."""

    index: dict[str, str] = {}
    for rule in rules:
        for spelling in rule.match_set:
            index.setdefault(spelling.strip().lower(), rule.target)
    return index
